"""Log section of the control configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_LINES, LOG_DIR, SERVICE_NAME


class LogConfig(BaseModel):
    """Where the agent writes its logs and how rotated files are named."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    layout: Literal["directory", "files"] = Field(
        "directory",
        description="'directory': rotated files matching prefix*.log; 'files': fixed log/error pair",
    )
    log_dir: str = Field(LOG_DIR, description="Directory holding the agent's log files")
    prefix: str = Field("", description="File name prefix of rotated log files (empty: every *.log)")
    log_file: str = Field(f"{SERVICE_NAME}.log", description="Main log file name (relative to log_dir)")
    error_file: str = Field(f"{SERVICE_NAME}.err", description="Error log file name (relative to log_dir)")
    default_lines: int = Field(DEFAULT_LINES, gt=0, description="Lines shown when -n is not given")
    follow_poll_secs: float = Field(0.5, gt=0, description="Size re-check interval while following")

    @field_validator("log_file", "error_file")
    @classmethod
    def validate_log_path(cls, v: str) -> str:
        """Validate log file names are relative (not absolute)."""
        if not v:
            raise ValueError("log file name cannot be empty")
        if Path(v).is_absolute():
            raise ValueError(f"log file name must be relative to log_dir, got absolute path: {v!r}")
        return v
