"""Create the main Typer CLI app."""

import typer

from ..api.log.cmd_errors import cmd_errors
from ..api.log.cmd_list_logs import cmd_list_logs
from ..api.log.cmd_logs import cmd_logs
from ..api.log.cmd_reset import cmd_reset
from ..api.service.cmd_reload import cmd_reload
from ..api.service.cmd_restart import cmd_restart
from ..api.service.cmd_start import cmd_start
from ..api.service.cmd_status import cmd_status
from ..api.service.cmd_stop import cmd_stop
from ..constants import CLI_NAME
from ._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from .parse_invocation import ParsedInvocation, parse_invocation

# logs/errors accept their flags in any order and skip anything unknown
_LENIENT = {"allow_extra_args": True, "ignore_unknown_options": True, "help_option_names": ["-h", "--help"]}

_LOG_OPTIONS = """
Log options:

  -f, --follow    Follow log output (like tail -f)

  -n, --lines N   Show last N lines (default: 50)

  -a, --all       Show logs from all files (not just the latest)
"""


def _parse_log_flags(ctx: typer.Context, subcommand: str) -> ParsedInvocation:
    from ..api.config.CtlConfig import CtlConfig
    from .display import get_display

    default_lines = CtlConfig.load().log.default_lines
    parsed, warnings = parse_invocation(subcommand, ctx.args, default_lines)
    if warnings:
        display = get_display()
        for warning in warnings:
            display.warning(warning)
    return parsed


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name=CLI_NAME,
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Comelit HUB HAP Service Control",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
        add_completion=False,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be 'text', 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit(1)

    @app.command(name="start")
    def start_cmd(ctx: typer.Context) -> None:
        """Start the service."""
        _handle_stage_result(cmd_start)(ctx)

    @app.command(name="stop")
    def stop_cmd(ctx: typer.Context) -> None:
        """Stop the service."""
        _handle_stage_result(cmd_stop)(ctx)

    @app.command(name="restart")
    def restart_cmd(ctx: typer.Context) -> None:
        """Restart the service."""
        _handle_stage_result(cmd_restart)(ctx)

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Show service status."""
        _handle_stage_result(cmd_status)(ctx)

    @app.command(name="reload")
    def reload_cmd(ctx: typer.Context) -> None:
        """Send SIGHUP so the service reopens its log files."""
        _handle_stage_result(cmd_reload)(ctx)

    @app.command(name="logs", context_settings=_LENIENT, epilog=_LOG_OPTIONS)
    def logs_cmd(ctx: typer.Context) -> None:
        """Show recent logs from the latest log file."""
        parsed = _parse_log_flags(ctx, "logs")
        if parsed.follow:
            from ..api.log.follow_logs import follow_logs
            from .display import get_display

            display = get_display()
            display.status("Following logs (Ctrl-C to stop)...")
            raise typer.Exit(follow_logs(parsed.lines, parsed.all_files, notify=display.warning))
        _handle_stage_result(cmd_logs)(ctx, lines=parsed.lines, all_files=parsed.all_files)

    @app.command(name="errors", context_settings=_LENIENT, epilog=_LOG_OPTIONS)
    def errors_cmd(ctx: typer.Context) -> None:
        """Show recent lines from the error log."""
        parsed = _parse_log_flags(ctx, "errors")
        if parsed.follow:
            from ..api.log.follow_logs import follow_errors
            from .display import get_display

            display = get_display()
            display.status("Following error log (Ctrl-C to stop)...")
            raise typer.Exit(follow_errors(parsed.lines, notify=display.warning))
        _handle_stage_result(cmd_errors)(ctx, lines=parsed.lines)

    @app.command(name="list-logs")
    def list_logs_cmd(ctx: typer.Context) -> None:
        """List all log files."""
        _handle_stage_result(cmd_list_logs)(ctx)

    @app.command(name="reset")
    def reset_cmd(
        ctx: typer.Context,
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    ) -> None:
        """Reset the service configuration (erases logs and agent data)."""
        confirmed = yes or typer.confirm(
            "This erases the service log files and its data directory. Continue?",
            default=False,
        )
        _handle_stage_result(cmd_reset)(ctx, confirmed=confirmed)

    @app.command(name="help")
    def help_cmd(ctx: typer.Context) -> None:
        """Show this message and exit."""
        parent = ctx.parent if ctx.parent is not None else ctx
        typer.echo(parent.get_help())
        raise typer.Exit(0)

    return app
