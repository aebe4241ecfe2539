"""Log module - locate, view, follow and reset the agent's log files."""

from .._output_schemas.log import (
    LogErrorsOutput,
    LogListLogsOutput,
    LogLogsOutput,
    LogResetOutput,
)
from .LogConfig import LogConfig

__all__ = [
    "LogConfig",
    "LogErrorsOutput",
    "LogListLogsOutput",
    "LogLogsOutput",
    "LogResetOutput",
]
