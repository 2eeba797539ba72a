"""What an API command hands back to the CLI: announce, progress, result, output."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Deferred outcome of a smokegen command.

    The command only sets ``announce`` and ``progress_callback``. Running the
    callback does the actual work while yielding ``(fraction, message)`` pairs,
    and fills in the remaining fields before it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
