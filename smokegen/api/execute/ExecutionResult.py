"""Execution result value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionResult:
    """Output and exit status captured from one bounded execution.

    ``truncated`` is set when the child produced more than the executor's
    output cap; ``captured_output`` then holds only the leading part.
    """

    captured_output: str
    exit_status: int
    truncated: bool = False
