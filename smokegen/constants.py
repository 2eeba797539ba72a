"""Shared constants for smokegen home directory and scan defaults."""

SMOKEGEN_HOME_EXT = ".smokegen"  # user-level state/config directory suffix

# Manual sections scanned for option declarations, in scan order
SUPPORTED_SECTIONS = ("1", "8")

# Seconds a utility gets to produce output before it is terminated
DEFAULT_TIMEOUT_SECS = 2.0

# Bytes of output kept per execution; the rest is discarded and the child terminated
DEFAULT_MAX_OUTPUT_BYTES = 1024 * 1024
