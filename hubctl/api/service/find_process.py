"""Search the live process table for the agent."""

import os
import subprocess

from ...utils.logger import get_logger

logger = get_logger("service.find_process")


def find_process(pattern: str) -> int | None:
    """Return the first PID whose full command line matches ``pattern``.

    Uses ``pgrep -f``. This process is never returned. Returns None when
    nothing matches or pgrep is unavailable.
    """
    try:
        completed = subprocess.run(
            ["pgrep", "-f", pattern],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.warning("pgrep not found; process search unavailable")
        return None

    # pgrep: 0 = match, 1 = no match, anything else = error
    if completed.returncode not in (0, 1):
        logger.warning("pgrep failed with exit code %s: %s", completed.returncode, completed.stderr.strip())
        return None

    own_pid = os.getpid()
    for token in completed.stdout.split():
        if token.isdigit() and int(token) != own_pid:
            return int(token)
    return None
