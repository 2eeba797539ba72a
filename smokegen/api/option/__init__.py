"""Option domain - registry of testable options and manual-page scanner."""

from .OptionDefinition import OptionDefinition
from .OptionKind import OptionKind
from .OptionRegistry import OptionRegistry
from .OptionScanner import OptionScanner

__all__ = [
    "OptionDefinition",
    "OptionKind",
    "OptionRegistry",
    "OptionScanner",
]
