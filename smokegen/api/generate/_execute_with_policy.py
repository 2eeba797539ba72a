import logging
from typing import Literal

from ..execute.BoundedExecutor import BoundedExecutor
from ..execute.ExecutionError import ExecutionError
from ..execute.ExecutionResult import ExecutionResult

logger = logging.getLogger(__name__)


def _execute_with_policy(
    executor: BoundedExecutor,
    command: str,
    on_error: Literal["skip", "abort"],
    warnings: list[str],
) -> ExecutionResult | None:
    """Execute ``command``; on ExecutionError re-raise ("abort") or record a warning and return None ("skip")."""
    try:
        result = executor.execute(command)
    except ExecutionError as exc:
        if on_error == "abort":
            raise
        logger.warning(f"Skipping {command!r}: {exc}")
        warnings.append(str(exc))
        return None

    if result.truncated:
        warnings.append(f"Output of {command} was truncated")
    return result
