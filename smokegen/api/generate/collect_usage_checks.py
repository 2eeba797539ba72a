from typing import Literal

from ..execute.BoundedExecutor import BoundedExecutor
from ..option.OptionScanner import OptionScanner
from ._execute_with_policy import _execute_with_policy
from .build_command import build_command
from .UsageCheck import UsageCheck


def collect_usage_checks(
    utility: str,
    scanner: OptionScanner,
    executor: BoundedExecutor,
    on_error: Literal["skip", "abort"],
    warnings: list[str],
) -> tuple[list[UsageCheck], UsageCheck | None]:
    """Observe ``utility`` misused and run bare.

    Every option the manual declares with a required argument is run without
    it, then the utility is run with no arguments at all.

    Returns:
        The invalid-usage checks and the no-arguments check (None if skipped)

    Raises:
        ExecutionError: If a command fails and on_error is "abort"
    """
    invalid_usage: list[UsageCheck] = []
    for name in scanner.argument_options(utility):
        flag = f"-{name}"
        command = build_command(utility, flag)
        result = _execute_with_policy(executor, command, on_error, warnings)
        if result is not None:
            invalid_usage.append(UsageCheck(utility=utility, args=flag, command=command, result=result))

    command = build_command(utility)
    result = _execute_with_policy(executor, command, on_error, warnings)
    no_arguments = None
    if result is not None:
        no_arguments = UsageCheck(utility=utility, args="", command=command, result=result)

    return invalid_usage, no_arguments
