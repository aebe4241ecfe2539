"""Check if a process ID is running."""

import os


def _pid_running(pid: int) -> bool:
    """Check if a process ID is running.

    Signal 0 probes the process table without delivering anything. A
    PermissionError still means the process exists.
    """
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except PermissionError:
        return True
    except OSError:
        return False
    return True
