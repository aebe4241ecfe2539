"""Top-level control configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import DATA_DIR, HUBCTL_HOME_DEFAULT
from ..log.LogConfig import LogConfig
from ..service.ServiceConfig import ServiceConfig


class CtlConfig(BaseModel):
    """Immutable configuration built once per invocation and passed to every component.

    Every field has a default matching the installer, so a missing config file
    is not an error.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    log: LogConfig = Field(default_factory=LogConfig)
    data_dir: str = Field(DATA_DIR, description="Agent state directory; reset removes its 'data' subdirectory")

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get the config directory from HUBCTL_HOME or default to /etc/comelit-hub-hap."""
        home_env = os.environ.get("HUBCTL_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path(HUBCTL_HOME_DEFAULT)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the optional JSON override file."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "CtlConfig":
        """Load overrides from the config file, falling back to defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for display."""
        return {
            "service": self.service.model_dump(),
            "log": self.log.model_dump(),
            "data_dir": self.data_dir,
        }
