"""One observed option invocation, ready to be rendered as an ATF test case."""

from dataclasses import dataclass

from ..execute.ExecutionResult import ExecutionResult
from ..option.OptionDefinition import OptionDefinition
from ._check_stream import _check_stream
from .format_atf_check import format_atf_check


@dataclass(frozen=True)
class TestCase:
    """Observed behaviour of ``utility`` when invoked with ``option``."""

    __test__ = False  # not a pytest class

    utility: str
    option: OptionDefinition
    command: str
    result: ExecutionResult

    @property
    def name(self) -> str:
        """ATF test case name, e.g. ``h_flag``."""
        return f"{self.option.value}_flag"

    @property
    def stream(self) -> str:
        return _check_stream(self.result)

    @property
    def check(self) -> str:
        return format_atf_check(self.utility, self.option.flag, self.result)
