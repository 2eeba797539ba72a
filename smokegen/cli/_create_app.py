"""Create the main Typer CLI app."""

import typer

from smokegen.api.config.SmokegenConfig import SmokegenConfig
from smokegen.cli.config import config
from smokegen.cli.exec import exec_command
from smokegen.cli.generate import generate
from smokegen.cli.scan import scan
from smokegen.utils.logger import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Derive smoke tests for command-line utilities from their manual pages",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="scan")(scan)
    app.command(name="exec")(exec_command)
    app.command(name="generate")(generate)
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        # Invalid config is reported by the command itself
        try:
            level = SmokegenConfig.load().log.level
        except ValueError:
            level = "INFO"
        configure_logging(SmokegenConfig.get_config_path().parent, level=level)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
