"""Create the main Typer CLI app."""

import typer

from bitdoctor.cli.config import config
from bitdoctor.cli.doctor import doctor


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="bitdoctor CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(doctor(), name="doctor")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Commands read the display format from the context chain
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
