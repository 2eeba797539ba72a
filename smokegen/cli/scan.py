"""Scan CLI command."""

from typing import Annotated

import typer

from smokegen.api.option.cmd_scan import cmd_scan
from smokegen.cli._handle_stage_result import handle_stage_result


def scan(
    ctx: typer.Context,
    utility: Annotated[str, typer.Argument(help="Utility whose manual page is scanned")],
    groff_dir: Annotated[
        str | None, typer.Option("--groff-dir", "-g", help="Directory holding <utility>.<section> sources")
    ] = None,
) -> None:
    """Find the testable options a utility declares in its manual page."""
    handle_stage_result(cmd_scan, ctx)(utility, groff_dir=groff_dir)
