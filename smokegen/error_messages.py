"""Fatal diagnostics for unrecoverable smokegen failures."""

import logging
import sys
from typing import NoReturn

logger = logging.getLogger(__name__)


def _emit_error(*lines: str) -> None:
    """Write error message lines to STDERR."""
    for line in lines:
        sys.stderr.write(line + "\n")


def setup_fault(primitive: str, original_error: Exception) -> NoReturn:
    """Log and display a pipe/process creation failure and exit.

    Args:
        primitive: The failing primitive (e.g. "popen()")
        original_error: The original exception
    """
    logger.error(f"Setup fault in {primitive}: {original_error}")
    _emit_error(
        "",
        "=" * 70,
        f"UNABLE TO START UTILITY: {primitive} failed",
        "=" * 70,
        f"\nOriginal error: {original_error}",
        "\nPossible solutions:",
        "  1. Check the process and open file limits:",
        "     ulimit -u; ulimit -n",
        "  2. Verify the configured shell exists and is executable",
        "=" * 70,
        "",
    )
    sys.exit(1)


def environment_fault(primitive: str, original_error: Exception) -> NoReturn:
    """Log and display an I/O multiplexing failure and exit.

    Args:
        primitive: The failing primitive (e.g. "select()")
        original_error: The original exception
    """
    logger.error(f"Environment fault in {primitive}: {original_error}")
    _emit_error(
        "",
        "=" * 70,
        f"UNRECOVERABLE ENVIRONMENT FAULT: {primitive} failed",
        "=" * 70,
        f"\nOriginal error: {original_error}",
        "=" * 70,
        "",
    )
    sys.exit(1)
