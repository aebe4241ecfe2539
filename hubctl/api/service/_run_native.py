"""Run a native service manager command."""

import subprocess
from collections.abc import Sequence

from ...utils.logger import get_logger
from ..ControlError import NativeManagerError

logger = get_logger("service.native")


def _run_native(command: Sequence[str], check: bool = True) -> subprocess.CompletedProcess:
    """Run ``command`` capturing its output.

    Args:
        command: argv of the native tool (systemctl, launchctl, journalctl)
        check: Raise NativeManagerError on a non-zero exit status

    Raises:
        NativeManagerError: The tool is missing, or failed while ``check`` is set
    """
    logger.debug("Running: %s", " ".join(command))
    try:
        completed = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise NativeManagerError(command, 127, str(exc)) from exc

    logger.debug("Exit code %s from %s", completed.returncode, command[0])
    if check and completed.returncode != 0:
        raise NativeManagerError(command, completed.returncode, (completed.stderr or "").strip())
    return completed
