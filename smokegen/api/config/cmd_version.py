"""Version command - returns smokegen version information."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigVersionOutput
from ...utils.get_package_version import get_package_version
from ..StageResult import StageResult


def cmd_version() -> StageResult:
    """Get smokegen version information."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Getting package version...")
        version = get_package_version()
        result_obj.result = f"smokegen version: {version}"
        result_obj.output = ConfigVersionOutput(errors=[], warnings=[], version=version).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Getting version information...",
        progress_callback=do_work,
    )
