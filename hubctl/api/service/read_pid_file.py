"""Read the agent's PID file without trusting it."""

from pathlib import Path

from ...utils.logger import get_logger

logger = get_logger("service.pid_file")


def read_pid_file(pid_file: Path) -> int | None:
    """Return the PID stored in ``pid_file``, or None when unavailable.

    A missing, unreadable, empty or garbage PID file is not an error: the file
    is an advisory hint owned by the agent's wrapper. Only the first line is read.
    """
    try:
        content = pid_file.read_text(encoding="utf-8", errors="replace").strip()
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.debug("Unable to read PID file %s: %s", pid_file, exc)
        return None

    if not content:
        return None
    try:
        pid = int(content.splitlines()[0].strip())
    except ValueError:
        logger.debug("Invalid PID file content in %s: %r", pid_file, content[:40])
        return None
    return pid if pid > 0 else None
