"""Show command - effective configuration."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .SmokegenConfig import SmokegenConfig


def cmd_show() -> StageResult:
    """Show the effective configuration (file values over defaults)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Loading configuration...")
        path = SmokegenConfig.get_config_path()
        try:
            config = SmokegenConfig.load()
        except ValueError as e:
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)], warnings=[], config_path=str(path), exists=path.exists(), content={}
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Failed")
            return

        warnings = [] if path.exists() else [f"No configuration file at {path}, using defaults"]
        result_obj.result = "Effective configuration"
        result_obj.output = ConfigShowOutput(
            errors=[], warnings=warnings, config_path=str(path), exists=path.exists(), content=config.to_dict()
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
