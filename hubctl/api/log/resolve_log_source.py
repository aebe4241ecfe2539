"""Ordered fallback chain selecting the source of the main log."""

from ..ControlError import ResourceNotFoundError
from ..StrategyOutcome import StrategyOutcome
from .locate_logs import latest_log_file, list_log_files
from .LogLocation import LogLocation
from .LogSource import LogSource


def resolve_log_source(location: LogLocation, platform: str, all_files: bool = False) -> LogSource:
    """Pick the files to read, or the journal when the log files are absent.

    Strategies, in order: the log directory (``directory`` layout) or the fixed
    main log (``files`` layout), then the systemd journal on Linux only.
    An existing directory without matching files is reported as such and does
    not fall back to the journal.
    """
    source = LogSource()

    if location.single_file:
        strategy = "file"
        if location.log_file.is_file():
            files = list_log_files(location) if all_files else [location.log_file]
            source.attempts.append(StrategyOutcome(strategy, True, str(location.log_file)))
            source.strategy = strategy
            source.files = files or [location.log_file]
            source.description = (
                f"Showing all logs from {location.log_dir}:" if all_files else f"Showing logs from {location.log_file}:"
            )
            return source
        missing = f"Log file not found: {location.log_file}"
    else:
        strategy = "directory"
        try:
            files = list_log_files(location) if all_files else []
            latest = files[-1] if files else (None if all_files else latest_log_file(location))
        except ResourceNotFoundError as exc:
            missing = str(exc)
        else:
            if latest is None:
                message = f"No log files found in {location.log_dir}"
                source.attempts.append(StrategyOutcome(strategy, False, message))
                source.warnings.append(message)
                return source
            source.attempts.append(StrategyOutcome(strategy, True, str(location.log_dir)))
            source.strategy = strategy
            source.files = files if all_files else [latest]
            source.description = (
                f"Showing all logs from {location.log_dir}:" if all_files else f"Showing logs from {latest}:"
            )
            return source

    source.attempts.append(StrategyOutcome(strategy, False, missing))
    source.warnings.append(missing)
    if platform != "linux":
        return source

    source.warnings.append("Trying journalctl instead...")
    source.attempts.append(StrategyOutcome("journal", True, "journalctl"))
    source.strategy = "journal"
    source.description = "Showing logs from the systemd journal:"
    return source
