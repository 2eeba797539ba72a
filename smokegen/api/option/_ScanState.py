"""Scanner states."""

from enum import Enum


class _ScanState(Enum):
    """Where the scanner is within the declare/describe stream of a manual page."""

    AWAITING_DECLARATION = "awaiting-declaration"
    BUFFERING_DESCRIPTION = "buffering-description"
