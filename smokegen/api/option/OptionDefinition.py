"""Option definition value object."""

from dataclasses import dataclass

from .OptionKind import OptionKind


@dataclass(frozen=True)
class OptionDefinition:
    """A testable option and the keyword its description must mention.

    Attributes:
        kind: Short or long option
        value: Literal option token without dashes (e.g. "h")
        keyword: Substring expected in the option's description (e.g. "help")
    """

    kind: OptionKind
    value: str
    keyword: str

    @property
    def flag(self) -> str:
        """Option as typed on a command line."""
        return f"-{self.value}" if self.kind is OptionKind.SHORT else f"--{self.value}"
