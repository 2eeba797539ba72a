"""Scan command - find the testable options a utility declares."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.option import MatchedOptionOutput, OptionScanOutput
from ..config.SmokegenConfig import SmokegenConfig
from ..StageResult import StageResult
from .OptionRegistry import OptionRegistry
from .OptionScanner import OptionScanner


def cmd_scan(utility: str, groff_dir: str | None = None) -> StageResult:
    """Scan ``utility``'s manual page for options in the testable registry.

    Args:
        utility: Utility name, used to locate ``<groff_dir>/<utility>.<section>``
        groff_dir: Override for the configured manual source directory
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SmokegenConfig.load()
            registry = OptionRegistry.build(opt.to_definition() for opt in config.scan.extra_options)
        except ValueError as e:
            result_obj.result = f"Scan failed: {e}"
            result_obj.output = OptionScanOutput(
                errors=[str(e)],
                warnings=[],
                utility=utility,
                groff_dir=groff_dir or "",
                sections_found=[],
                options=[],
                argument_options=[],
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Failed")
            return

        scanner = OptionScanner(registry, groff_dir or config.scan.groff_dir)

        yield (0.3, f"Scanning manual page of {utility}...")
        sections_found = scanner.sections_found(utility)
        matched = scanner.scan(utility)

        warnings: list[str] = []
        if not sections_found:
            warnings.append(f"No manual source for {utility} in {Path(scanner.groff_dir)}")

        result_obj.result = f"Found {len(matched)} testable option(s) for {utility}"
        result_obj.output = OptionScanOutput(
            errors=[],
            warnings=warnings,
            utility=utility,
            groff_dir=str(scanner.groff_dir),
            sections_found=sections_found,
            options=[
                MatchedOptionOutput(kind=d.kind.value, value=d.value, keyword=d.keyword) for d in matched
            ],
            argument_options=scanner.argument_options(utility),
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Scanning {utility} for testable options...",
        progress_callback=do_work,
    )
