"""Built-in catalog of easily testable options."""

from .OptionDefinition import OptionDefinition
from .OptionKind import OptionKind

TESTABLE_OPTIONS = (
    OptionDefinition(kind=OptionKind.SHORT, value="h", keyword="help"),
    OptionDefinition(kind=OptionKind.SHORT, value="v", keyword="version"),
)
