"""Output schemas for service lifecycle and signal commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for the start command."""
    service: str = Field(..., description="Native service identifier (unit name or launchd label)")
    platform: str = Field(..., description="Resolved platform: 'linux', 'darwin' or 'unsupported'")
    changed: bool = Field(..., description="Whether the native manager was asked to act")
    running: bool = Field(..., description="Whether the service is active after the command")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for the stop command."""
    service: str = Field(..., description="Native service identifier")
    platform: str = Field(..., description="Resolved platform")
    changed: bool = Field(..., description="Whether the native manager was asked to act")
    running: bool = Field(..., description="Whether the service is active after the command")


class ServiceRestartOutput(BaseOutputSchema):
    """Output schema for the restart command."""
    service: str = Field(..., description="Native service identifier")
    platform: str = Field(..., description="Resolved platform")
    restarted: bool = Field(..., description="Whether the restart completed")


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for the status command.

    ``detail`` holds the status lines: native output verbatim on systemd, a
    reconstructed report on launchd.
    """
    service: str = Field(..., description="Native service identifier")
    platform: str = Field(..., description="Resolved platform")
    active: bool = Field(..., description="Whether the service is active (systemd) or loaded (launchd)")
    pid: int = Field(..., description="PID read from the PID file, -1 if unavailable")
    pid_state: str = Field(..., description="'running', 'stale' or empty string when no PID file was read")
    detail: list[str] = Field(..., description="Human readable status lines")


class ServiceReloadOutput(BaseOutputSchema):
    """Output schema for the reload (SIGHUP) command."""
    service: str = Field(..., description="Native service identifier")
    platform: str = Field(..., description="Resolved platform")
    signalled: bool = Field(..., description="Whether the signal was delivered")
    strategy: str = Field(..., description="Strategy that delivered the signal, empty string if none did")
    pid: int = Field(..., description="PID that received the signal, -1 if unknown or not delivered")
    attempts: list[dict[str, Any]] = Field(..., description="Ordered strategy attempts")


register_output_schema("service", "start", ServiceStartOutput)
register_output_schema("service", "stop", ServiceStopOutput)
register_output_schema("service", "restart", ServiceRestartOutput)
register_output_schema("service", "status", ServiceStatusOutput)
register_output_schema("service", "reload", ServiceReloadOutput)
