"""Read the agent's output from the systemd journal."""

import subprocess

from ...utils.logger import get_logger
from ..ControlError import NativeManagerError
from ..service._run_native import _run_native

logger = get_logger("log.journal")


def read_journal(unit: str, lines: int) -> list[str]:
    """Last ``lines`` journal entries of ``unit``.

    Raises:
        NativeManagerError: journalctl is missing or failed
    """
    completed = _run_native(["journalctl", "-u", unit, "-n", str(lines), "--no-pager"])
    return completed.stdout.rstrip("\n").splitlines()


def follow_journal(unit: str, lines: int) -> int:
    """Stream the journal of ``unit`` to this process's stdout until interrupted.

    Returns:
        journalctl's exit status, 0 after Ctrl-C
    """
    command = ["journalctl", "-u", unit, "-n", str(lines), "-f"]
    logger.debug("Running: %s", " ".join(command))
    try:
        return subprocess.call(command)
    except FileNotFoundError as exc:
        raise NativeManagerError(command, 127, str(exc)) from exc
    except KeyboardInterrupt:
        return 0
