"""Execute domain - bounded subprocess execution."""

from .BoundedExecutor import BoundedExecutor
from .ExecutionError import ExecutionError
from .ExecutionResult import ExecutionResult

__all__ = [
    "BoundedExecutor",
    "ExecutionError",
    "ExecutionResult",
]
