"""Observed behaviour of a utility run without arguments, or with an option missing its argument."""

from dataclasses import dataclass

from ..execute.ExecutionResult import ExecutionResult
from .format_atf_check import format_atf_check


@dataclass(frozen=True)
class UsageCheck:
    """One ``atf_check`` inside the invalid_usage or no_arguments test case.

    Attributes:
        utility: Utility under test
        args: Command-line arguments, e.g. "-f", or "" for a bare invocation
        command: Shell command that produced ``result``
        result: Observed output and exit status
    """

    utility: str
    args: str
    command: str
    result: ExecutionResult

    @property
    def check(self) -> str:
        return format_atf_check(self.utility, self.args, self.result)
