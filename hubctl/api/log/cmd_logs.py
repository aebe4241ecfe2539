"""Log show command - last N lines of the agent's main log."""

from collections.abc import Iterator

from ..ControlError import NativeManagerError
from ..StageResult import StageResult
from . import LogLogsOutput
from ._journal import read_journal
from .LogLocation import LogLocation
from .resolve_log_source import resolve_log_source
from .tail_lines import tail_lines


def cmd_logs(lines: int | None = None, all_files: bool = False) -> StageResult:
    """Show the last ``lines`` lines of the latest log file.

    With ``all_files`` every candidate file is read oldest first and trimmed to
    the last ``lines`` lines of the combined stream. When the log files are
    absent on Linux the systemd journal is read instead.

    Missing logs are reported as warnings; only a failing journalctl is an error.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.CtlConfig import CtlConfig
        from ..service.detect_platform import detect_platform

        yield (0.1, "Loading configuration...")
        config = CtlConfig.load()
        count = lines if lines is not None else config.log.default_lines
        location = LogLocation.from_config(config.log)

        yield (0.3, "Locating log files...")
        source = resolve_log_source(location, detect_platform(), all_files=all_files)

        errors: list[str] = []
        output_lines: list[str] = []
        if source.strategy == "journal":
            yield (0.6, "Reading systemd journal...")
            try:
                output_lines = read_journal(config.service.unit_name, count)
            except NativeManagerError as exc:
                errors.append(str(exc))
        elif source.files:
            yield (0.6, f"Reading {len(source.files)} file(s)...")
            output_lines = tail_lines(source.files, count)

        yield (1.0, "Complete")
        if errors:
            result_obj.result = errors[0]
        elif source.strategy:
            result_obj.result = source.description
        else:
            result_obj.result = source.warnings[-1]
        result_obj.output = LogLogsOutput(
            errors=errors,
            warnings=source.warnings,
            source=source.strategy,
            files=[str(path) for path in source.files],
            lines=output_lines,
            attempts=[attempt.to_dict() for attempt in source.attempts],
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce="Reading logs...",
        progress_callback=do_work,
    )
