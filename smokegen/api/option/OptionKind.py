"""Option kind enumeration."""

from enum import Enum


class OptionKind(str, Enum):
    """Kind of a testable option: (s)hort or (l)ong."""

    SHORT = "s"
    LONG = "l"
