"""Service status DTO."""

from dataclasses import dataclass, field


@dataclass
class ServiceStatusReport:
    """Status of the managed service."""

    active: bool
    """Whether the unit is active (systemd) or the label is loaded (launchd)."""

    detail: list[str] = field(default_factory=list)
    """Lines to show the user."""

    pid: int | None = None
    """PID read from the PID file, if any."""

    pid_state: str = ""
    """'running', 'stale' or empty string when no PID file was read."""
