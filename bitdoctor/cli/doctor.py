"""Doctor Typer app factory."""

import typer

from bitdoctor.api.doctor.cmd_examine import cmd_examine
from bitdoctor.api.doctor.cmd_list import cmd_list
from bitdoctor.cli._handle_stage_result import handle_stage_result


def doctor() -> typer.Typer:
    """Create and configure the doctor Typer app."""
    app = typer.Typer(
        name="doctor",
        help="Diagnose a Bit workspace",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="run")
    def run_cmd(
        name: str | None = typer.Argument(None, help="Diagnosis name (default: all diagnoses)"),
        path: str | None = typer.Option(None, "--path", "-p", help="Directory inside the workspace (default: cwd)"),
    ) -> None:
        """Examine the workspace and print symptoms and remedies."""
        handle_stage_result(cmd_examine)(name, path)

    @app.command(name="list")
    def list_cmd() -> None:
        """List available diagnoses."""
        handle_stage_result(cmd_list)()

    return app
