"""A PID together with its liveness, probed from the process table."""

from dataclasses import dataclass
from pathlib import Path

from ._pid_running import _pid_running
from .read_pid_file import read_pid_file


@dataclass(frozen=True)
class ProcessHandle:
    pid: int
    alive: bool

    @classmethod
    def probe(cls, pid: int) -> "ProcessHandle":
        return cls(pid=pid, alive=_pid_running(pid))

    @classmethod
    def from_pid_file(cls, pid_file: Path) -> "ProcessHandle | None":
        """Re-validate the PID file against the live process table.

        Returns None when the file is absent or unreadable.
        """
        pid = read_pid_file(pid_file)
        if pid is None:
            return None
        return cls.probe(pid)
