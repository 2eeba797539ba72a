"""Exec command - run one shell command under the bounded executor."""

from collections.abc import Iterator

from .._output_schemas.execute import ExecuteExecOutput
from ..config.SmokegenConfig import SmokegenConfig
from ..StageResult import StageResult
from .BoundedExecutor import BoundedExecutor
from .ExecutionError import ExecutionError


def cmd_exec(command: str, timeout_secs: float | None = None) -> StageResult:
    """Run ``command`` via the configured shell and report its output and status."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SmokegenConfig.load()
            exec_cfg = config.execute
            executor = BoundedExecutor(
                timeout_secs=timeout_secs if timeout_secs is not None else exec_cfg.timeout_secs,
                shell=exec_cfg.shell,
                clean_env=exec_cfg.clean_env,
                max_output_bytes=exec_cfg.max_output_bytes,
            )
        except ValueError as e:
            result_obj.result = f"Exec failed: {e}"
            result_obj.output = ExecuteExecOutput(
                errors=[str(e)],
                warnings=[],
                command=command,
                timeout_secs=timeout_secs or 0.0,
                captured_output="",
                exit_status=None,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.3, f"Running for at most {executor.timeout_secs}s...")
        try:
            execution = executor.execute(command)
        except ExecutionError as e:
            result_obj.result = str(e)
            result_obj.output = ExecuteExecOutput(
                errors=[str(e)],
                warnings=[],
                command=command,
                timeout_secs=executor.timeout_secs,
                captured_output="",
                exit_status=None,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Failed")
            return

        warnings: list[str] = []
        if execution.truncated:
            warnings.append(f"Output truncated at {executor.max_output_bytes} bytes")

        result_obj.result = f"Command exited with status {execution.exit_status}"
        result_obj.output = ExecuteExecOutput(
            errors=[],
            warnings=warnings,
            command=command,
            timeout_secs=executor.timeout_secs,
            captured_output=execution.captured_output,
            exit_status=execution.exit_status,
            truncated=execution.truncated,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Executing: {command}",
        progress_callback=do_work,
    )
