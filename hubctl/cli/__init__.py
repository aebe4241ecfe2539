"""CLI - main entry point."""

import sys


def _usage_error_type() -> type[Exception]:
    """The UsageError class of the click build Typer parses with."""
    import typer

    return next(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        0 on success, explicit help or an idempotent warning; 1 otherwise
    """
    import typer

    from ..constants import CLI_NAME
    from ..utils.logger import configure_logging
    from ._create_app import _create_app

    configure_logging()

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from ..utils.get_package_version import get_package_version

        print(f"{CLI_NAME} {get_package_version()}")
        return 0

    app = _create_app()
    usage_error = _usage_error_type()
    try:
        rv = app(argv, prog_name=CLI_NAME, standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except typer.Abort:
        typer.echo("Aborted", err=True)
        return 1
    except Exception as e:
        if not isinstance(e, usage_error):
            typer.echo(f"Unhandled error: {e}", err=True)
            return 1
        command = typer.main.get_command(app)
        with command.context_class(command, info_name=CLI_NAME) as ctx:
            typer.echo(command.get_help(ctx))
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 1
