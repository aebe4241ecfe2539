"""Error hierarchy for service control and log operations.

Commands catch ``ControlError`` inside their work generator and turn it into an
error result; anything else is a programming error and propagates to the CLI.
"""

from collections.abc import Sequence


class ControlError(Exception):
    """Base class for expected, user-facing failures."""


class UnsupportedPlatformError(ControlError):
    """The running OS has no supported service manager."""

    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Unsupported operating system: {system}")


class PrivilegeRequiredError(ControlError):
    """A mutating command was invoked without root privilege."""

    def __init__(self, message: str = "This command must be run as root (use sudo)"):
        super().__init__(message)


class ResourceNotFoundError(ControlError):
    """A log directory, log file, PID file or process could not be found."""


class NativeManagerError(ControlError):
    """The native service manager (systemctl, launchctl, journalctl) failed.

    The native exit status and stderr are kept verbatim.
    """

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr}" if stderr else ""
        super().__init__(f"'{' '.join(self.command)}' failed with exit code {returncode}{detail}")
