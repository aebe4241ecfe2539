"""Discover the agent's log files in either supported layout."""

from datetime import datetime
from pathlib import Path

from ..ControlError import ResourceNotFoundError
from .LogFileInfo import LogFileInfo
from .LogLocation import LogLocation


def is_candidate(location: LogLocation, path: Path) -> bool:
    """Whether ``path`` belongs to the main log family of ``location``.

    Directory layout: ``<prefix>*.log``. Files layout: the fixed main log and its
    uncompressed numbered siblings (``<log_file>.1``, ``<log_file>.2``, ...).
    """
    if path.parent != location.log_dir:
        return False
    name = path.name
    if location.single_file:
        base = location.log_file.name
        if name == base:
            return True
        suffix = name[len(base) + 1 :] if name.startswith(f"{base}.") else ""
        return suffix.isdigit()
    return name.startswith(location.prefix) and name.endswith(".log")


def _stat_candidates(location: LogLocation) -> list[tuple[Path, float, int]]:
    if not location.log_dir.is_dir():
        raise ResourceNotFoundError(f"Log directory not found: {location.log_dir}")

    entries: list[tuple[Path, float, int]] = []
    for path in location.log_dir.iterdir():
        if not is_candidate(location, path):
            continue
        try:
            stat = path.stat()
        except FileNotFoundError:
            # Rotated away between listing and stat
            continue
        if not path.is_file():
            continue
        entries.append((path, stat.st_mtime, stat.st_size))
    entries.sort(key=lambda entry: (entry[1], entry[0].name))
    return entries


def list_log_files(location: LogLocation) -> list[Path]:
    """Candidate log files, oldest first (ties broken by name).

    Raises:
        ResourceNotFoundError: If the log directory does not exist
    """
    return [path for path, _mtime, _size in _stat_candidates(location)]


def latest_log_file(location: LogLocation) -> Path | None:
    """Most recently modified candidate, or None when the directory holds none."""
    files = list_log_files(location)
    return files[-1] if files else None


def describe_log_files(location: LogLocation) -> list[LogFileInfo]:
    """Candidates with size and modification time, oldest first."""
    return [
        LogFileInfo(path=path, size=size, modified=datetime.fromtimestamp(mtime))
        for path, mtime, size in _stat_candidates(location)
    ]
