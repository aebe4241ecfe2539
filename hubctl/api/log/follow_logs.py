"""Blocking follow mode for the main and error logs."""

import sys
import threading
from collections.abc import Callable
from pathlib import Path

from ..ControlError import ControlError
from ._journal import follow_journal
from .follow_files import follow_files, snapshot_offsets
from .locate_logs import is_candidate
from .LogLocation import LogLocation
from .resolve_log_source import resolve_log_source
from .tail_lines import tail_lines


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _print_initial(paths: list[Path], count: int, write: Callable[[str], object]) -> dict[Path, int]:
    """Print the tail up to the current end of each file and return those ends."""
    ends = snapshot_offsets(paths)
    for line in tail_lines(paths, count, ends=ends):
        write(line + "\n")
    return ends


def follow_logs(
    lines: int | None = None,
    all_files: bool = False,
    write: Callable[[str], object] | None = None,
    notify: Callable[[str], None] | None = None,
    stop: threading.Event | None = None,
) -> int:
    """Print the last ``lines`` lines of the main log, then stream new content.

    ``notify`` receives warnings (missing directory, journal fallback). With
    ``all_files`` every candidate file is followed, including files that
    rotation creates later.

    Returns:
        Exit code; 0 when interrupted with Ctrl-C
    """
    from ..config.CtlConfig import CtlConfig
    from ..service.detect_platform import detect_platform

    write = write or _stdout_write
    notify = notify or (lambda message: None)

    config = CtlConfig.load()
    count = lines if lines is not None else config.log.default_lines
    location = LogLocation.from_config(config.log)
    source = resolve_log_source(location, detect_platform(), all_files=all_files)
    for warning in source.warnings:
        notify(warning)

    if source.strategy == "journal":
        try:
            return follow_journal(config.service.unit_name, count)
        except ControlError as exc:
            notify(str(exc))
            return 1
    if not source.files:
        return 0

    def accept(path: Path) -> bool:
        return is_candidate(location, location.log_dir / path.name)

    ends = _print_initial(source.files, count, write)
    try:
        follow_files(
            source.files,
            write,
            poll_secs=config.log.follow_poll_secs,
            stop=stop,
            headers=all_files,
            accept=accept if all_files else None,
            start_offsets=ends,
        )
    except KeyboardInterrupt:
        return 0
    return 0


def follow_errors(
    lines: int | None = None,
    write: Callable[[str], object] | None = None,
    notify: Callable[[str], None] | None = None,
    stop: threading.Event | None = None,
) -> int:
    """Print the last ``lines`` lines of the error log, then stream new content."""
    from ..config.CtlConfig import CtlConfig

    write = write or _stdout_write
    notify = notify or (lambda message: None)

    config = CtlConfig.load()
    count = lines if lines is not None else config.log.default_lines
    location = LogLocation.from_config(config.log)
    if not location.error_file.is_file():
        notify(f"Error log not found: {location.error_file}")
        return 0

    ends = _print_initial([location.error_file], count, write)
    try:
        follow_files(
            [location.error_file],
            write,
            poll_secs=config.log.follow_poll_secs,
            stop=stop,
            start_offsets=ends,
        )
    except KeyboardInterrupt:
        return 0
    return 0
