"""Read-only description of where the agent's logs live."""

from dataclasses import dataclass
from pathlib import Path

from .LogConfig import LogConfig


@dataclass(frozen=True)
class LogLocation:
    log_dir: Path
    prefix: str
    log_file: Path
    error_file: Path
    layout: str

    @classmethod
    def from_config(cls, config: LogConfig) -> "LogLocation":
        log_dir = Path(config.log_dir).expanduser()
        return cls(
            log_dir=log_dir,
            prefix=config.prefix,
            log_file=log_dir / config.log_file,
            error_file=log_dir / config.error_file,
            layout=config.layout,
        )

    @property
    def single_file(self) -> bool:
        """Whether the main log is a fixed file rather than a rotated set."""
        return self.layout == "files"
