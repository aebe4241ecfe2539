"""Service section of the control configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import (
    AGENT_BINARY,
    LAUNCHD_LABEL,
    LAUNCHD_PLIST,
    PID_FILE_DARWIN,
    PID_FILE_LINUX,
    RESTART_DELAY_SECS,
    SERVICE_NAME,
)


class ServiceConfig(BaseModel):
    """Names and paths used to address the agent through the native service manager."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(SERVICE_NAME, description="Logical service name")
    unit_name: str = Field(SERVICE_NAME, description="Systemd unit name")
    label: str = Field(LAUNCHD_LABEL, description="Launchd label (reverse DNS format)")
    plist_path: str = Field(LAUNCHD_PLIST, description="Launchd plist loaded and unloaded by start/stop")
    pid_file_linux: str = Field(PID_FILE_LINUX, description="PID file written by the wrapper on Linux")
    pid_file_darwin: str = Field(PID_FILE_DARWIN, description="PID file written by the wrapper on macOS")
    process_pattern: str = Field(
        f"^{AGENT_BINARY}( |$)",
        description="Extended regex matched against full command lines (pgrep -f) when the PID file is unusable",
    )
    restart_delay_secs: float = Field(RESTART_DELAY_SECS, ge=0, description="Pause between launchd unload and load")

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str) -> str:
        # Basic reverse DNS format validation
        parts = v.split(".")
        if len(parts) < 2 or not all(parts):
            raise ValueError(f"service.label must be in reverse DNS format (e.g., 'com.example.app'), got: {v!r}")
        return v

    @field_validator("unit_name")
    @classmethod
    def validate_unit_name(cls, v: str) -> str:
        stem = v.removesuffix(".service")
        if not stem or not stem.replace("-", "").replace("_", "").replace("@", "").isalnum():
            raise ValueError(
                f"service.unit_name must be a valid systemd unit name "
                f"(alphanumeric, hyphens, underscores), got: {v!r}"
            )
        return v
