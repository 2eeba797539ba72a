"""Generate command - write atf-sh smoke tests for utilities."""

from collections.abc import Iterator
from pathlib import Path
from typing import Literal

from .._output_schemas.generate import GeneratedScriptOutput, GenerateGenerateOutput
from ..config.SmokegenConfig import SmokegenConfig
from ..execute.BoundedExecutor import BoundedExecutor
from ..execute.ExecutionError import ExecutionError
from ..option.OptionRegistry import OptionRegistry
from ..option.OptionScanner import OptionScanner
from ..StageResult import StageResult
from .collect_test_cases import collect_test_cases
from .collect_usage_checks import collect_usage_checks
from .GenerateError import GenerateError
from .render_test_script import render_test_script
from .write_test_script import write_test_script


def cmd_generate(
    utilities: list[str],
    groff_dir: str | None = None,
    output_dir: str | None = None,
    timeout_secs: float | None = None,
    on_error: Literal["skip", "abort"] | None = None,
) -> StageResult:
    """Scan, execute and render one test script per utility.

    Arguments left as None fall back to the configuration file.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration...")
        scripts: list[GeneratedScriptOutput] = []
        skipped: list[str] = []
        warnings: list[str] = []

        def finish(message: str, errors: list[str], out_dir: str) -> None:
            result_obj.result = message
            result_obj.output = GenerateGenerateOutput(
                errors=errors,
                warnings=warnings,
                output_dir=out_dir,
                scripts=scripts,
                skipped=skipped,
            ).model_dump(mode="python")
            result_obj.success = not errors

        try:
            config = SmokegenConfig.load()
            registry = OptionRegistry.build(opt.to_definition() for opt in config.scan.extra_options)
            executor = BoundedExecutor(
                timeout_secs=timeout_secs if timeout_secs is not None else config.execute.timeout_secs,
                shell=config.execute.shell,
                clean_env=config.execute.clean_env,
                max_output_bytes=config.execute.max_output_bytes,
            )
        except ValueError as e:
            finish(f"Generate failed: {e}", [str(e)], output_dir or "")
            yield (1.0, "Failed")
            return

        scanner = OptionScanner(registry, groff_dir or config.scan.groff_dir)
        policy = on_error or config.execute.on_error
        target = Path(output_dir or config.generate.output_dir)

        if not utilities:
            finish("Generate failed: no utilities given", ["at least one utility is required"], str(target))
            yield (1.0, "Failed")
            return

        for index, utility in enumerate(utilities):
            yield (0.1 + 0.85 * index / len(utilities), f"Testing {utility}...")
            if not scanner.sections_found(utility):
                skipped.append(utility)
                continue

            try:
                cases = collect_test_cases(utility, scanner, executor, policy, warnings)
                invalid_usage, no_arguments = collect_usage_checks(utility, scanner, executor, policy, warnings)
            except ExecutionError as e:
                finish(f"Generate aborted: {e}", [str(e)], str(target))
                yield (1.0, "Aborted")
                return

            names = [case.name for case in cases]
            if invalid_usage:
                names.append("invalid_usage")
            if no_arguments is not None:
                names.append("no_arguments")
            if not names:
                skipped.append(utility)
                continue

            try:
                script = render_test_script(utility, cases, invalid_usage, no_arguments)
                path = write_test_script(target, utility, script)
            except GenerateError as e:
                finish(f"Generate failed: {e}", [str(e)], str(target))
                yield (1.0, "Failed")
                return

            scripts.append(GeneratedScriptOutput(utility=utility, path=str(path), test_cases=names))

        finish(f"Wrote {len(scripts)} test script(s) to {target}", [], str(target))
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Generating smoke tests for {', '.join(utilities) or 'no utilities'}...",
        progress_callback=do_work,
    )
