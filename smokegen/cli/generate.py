"""Generate CLI command."""

from typing import Annotated

import typer

from smokegen.api.generate.cmd_generate import cmd_generate
from smokegen.cli._handle_stage_result import handle_stage_result


def generate(
    ctx: typer.Context,
    utilities: Annotated[list[str], typer.Argument(help="Utilities to generate smoke tests for")],
    groff_dir: Annotated[
        str | None, typer.Option("--groff-dir", "-g", help="Directory holding <utility>.<section> sources")
    ] = None,
    output_dir: Annotated[str | None, typer.Option("--output-dir", "-o", help="Directory for test scripts")] = None,
    timeout: Annotated[
        float | None, typer.Option("--timeout", "-t", help="Seconds each invocation gets to produce output")
    ] = None,
    on_error: Annotated[
        str | None, typer.Option("--on-error", help="On an execution fault: skip the command or abort")
    ] = None,
) -> None:
    """Scan, run and write atf-sh smoke tests for each utility."""
    if on_error is not None and on_error not in ("skip", "abort"):
        typer.echo(f"Error: --on-error must be 'skip' or 'abort', got '{on_error}'", err=True)
        raise typer.Exit(1)

    handle_stage_result(cmd_generate, ctx)(
        utilities,
        groff_dir=groff_dir,
        output_dir=output_dir,
        timeout_secs=timeout,
        on_error=on_error,
    )
