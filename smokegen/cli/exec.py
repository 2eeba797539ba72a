"""Exec CLI command."""

from typing import Annotated

import typer

from smokegen.api.execute.cmd_exec import cmd_exec
from smokegen.cli._handle_stage_result import handle_stage_result


def exec_command(
    ctx: typer.Context,
    command: Annotated[str, typer.Argument(help="Shell command, run as <shell> -c COMMAND")],
    timeout: Annotated[
        float | None, typer.Option("--timeout", "-t", help="Seconds the command gets to produce output")
    ] = None,
) -> None:
    """Run a command with a bounded output window and show its output and status."""
    handle_stage_result(cmd_exec, ctx)(command, timeout_secs=timeout)
