"""Output schemas for log viewing and maintenance commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LogLogsOutput(BaseOutputSchema):
    """Output schema for the logs command."""
    source: str = Field(..., description="Strategy that produced the lines: 'file', 'directory', 'journal' or empty string")
    files: list[str] = Field(..., description="Files read, oldest first; empty for the journal")
    lines: list[str] = Field(..., description="Last N lines, in original order")
    attempts: list[dict[str, Any]] = Field(..., description="Ordered strategy attempts")


class LogErrorsOutput(BaseOutputSchema):
    """Output schema for the errors command."""
    source: str = Field(..., description="'file' when the error log was read, empty string otherwise")
    files: list[str] = Field(..., description="Error log file read, empty if missing")
    lines: list[str] = Field(..., description="Last N lines of the error log")


class LogListLogsOutput(BaseOutputSchema):
    """Output schema for the list-logs command."""
    log_dir: str = Field(..., description="Directory searched")
    found: bool = Field(..., description="Whether any log file was found")
    files: list[dict[str, Any]] = Field(..., description="Entries with path, size and modified (ISO 8601)")


class LogResetOutput(BaseOutputSchema):
    """Output schema for the reset command."""
    reset: bool = Field(..., description="Whether the log files were reset")
    recreated: list[str] = Field(..., description="Log files truncated and recreated")
    removed: list[str] = Field(..., description="Data directories removed")


register_output_schema("log", "logs", LogLogsOutput)
register_output_schema("log", "errors", LogErrorsOutput)
register_output_schema("log", "list_logs", LogListLogsOutput)
register_output_schema("log", "reset", LogResetOutput)
