import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: str | None = None, log_file: Path | None = None) -> None:
    """Configure the ``hubctl`` logger namespace.

    Args:
        level: Level name. Defaults to $HUBCTL_LOG_LEVEL, then WARNING.
        log_file: Optional rotating log file. Defaults to $HUBCTL_LOG_FILE when set.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or os.environ.get("HUBCTL_LOG_LEVEL") or "WARNING").upper()
    if log_file is None and os.environ.get("HUBCTL_LOG_FILE"):
        log_file = Path(os.environ["HUBCTL_LOG_FILE"]).expanduser()

    root_logger = logging.getLogger("hubctl")
    root_logger.setLevel(getattr(logging, level_name, logging.WARNING))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached by ``configure_logging`` at the CLI entry point; library
    use without it falls back to the standard logging defaults.
    """
    return logging.getLogger(f"hubctl.{name}")
