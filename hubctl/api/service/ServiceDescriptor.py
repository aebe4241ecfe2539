"""Immutable description of the managed service on the resolved platform."""

import platform as _platform
from dataclasses import dataclass
from pathlib import Path

from .detect_platform import detect_platform
from .ServiceConfig import ServiceConfig


@dataclass(frozen=True)
class ServiceDescriptor:
    """Everything the control tool needs to address the agent.

    ``identifier`` is the systemd unit name on Linux and the launchd label on
    macOS. ``system`` keeps the raw OS name for error messages.
    """

    name: str
    platform: str
    system: str
    identifier: str
    pid_file: Path
    plist_path: Path
    process_pattern: str
    restart_delay_secs: float = 1.0

    @classmethod
    def resolve(cls, config: ServiceConfig, platform: str | None = None) -> "ServiceDescriptor":
        """Derive the descriptor once from configuration and the detected platform."""
        resolved = platform if platform is not None else detect_platform()
        if resolved == "linux":
            identifier = config.unit_name
            pid_file = config.pid_file_linux
        elif resolved == "darwin":
            identifier = config.label
            pid_file = config.pid_file_darwin
        else:
            identifier = config.name
            pid_file = config.pid_file_darwin
        return cls(
            name=config.name,
            platform=resolved,
            system=_platform.system() or "unknown",
            identifier=identifier,
            pid_file=Path(pid_file),
            plist_path=Path(config.plist_path),
            process_pattern=config.process_pattern,
            restart_delay_secs=config.restart_delay_secs,
        )
