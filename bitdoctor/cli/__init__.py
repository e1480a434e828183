"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from bitdoctor.api.config.BitdoctorConfig import BitdoctorConfig
    from bitdoctor.cli._create_app import _create_app
    from bitdoctor.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from bitdoctor.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"bitdoctor {result.output['version']}")
        return 0 if result.success else 1

    # Invalid config is reported by the command itself
    try:
        level = BitdoctorConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level=level)

    app = _create_app()
    try:
        # Without standalone mode click returns the code of typer.Exit (e.g. after --help)
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except click.exceptions.Abort:
        typer.echo("Aborted", err=True)
        return 1
