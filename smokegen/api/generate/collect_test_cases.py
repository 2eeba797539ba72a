from typing import Literal

from ..execute.BoundedExecutor import BoundedExecutor
from ..option.OptionScanner import OptionScanner
from ._execute_with_policy import _execute_with_policy
from .build_command import build_command
from .TestCase import TestCase


def collect_test_cases(
    utility: str,
    scanner: OptionScanner,
    executor: BoundedExecutor,
    on_error: Literal["skip", "abort"],
    warnings: list[str],
) -> list[TestCase]:
    """Scan ``utility`` and execute every matched option once.

    Args:
        utility: Utility under test
        scanner: Scanner bound to the manual source directory
        executor: Executor used for each option invocation
        on_error: "skip" drops a command whose output cannot be read, "abort" re-raises
        warnings: Receives one message per skipped command or repeated option

    Returns:
        Test cases in declaration order, at most one per option value

    Raises:
        ExecutionError: If a command fails and on_error is "abort"
    """
    cases: list[TestCase] = []
    seen: set[str] = set()

    for option in scanner.scan(utility):
        if option.value in seen:
            warnings.append(f"{utility}: option '{option.value}' declared more than once, kept the first")
            continue
        seen.add(option.value)

        command = build_command(utility, option.flag)
        result = _execute_with_policy(executor, command, on_error, warnings)
        if result is not None:
            cases.append(TestCase(utility=utility, option=option, command=command, result=result))

    return cases
