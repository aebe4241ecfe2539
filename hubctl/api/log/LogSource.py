"""Outcome of resolving where log lines should come from."""

from dataclasses import dataclass, field
from pathlib import Path

from ..StrategyOutcome import StrategyOutcome


@dataclass
class LogSource:
    """Which strategy satisfied a log request.

    ``strategy`` is "directory", "file", "journal", or empty string when no
    strategy could serve the request (the reason is in ``warnings``).
    """

    strategy: str = ""
    files: list[Path] = field(default_factory=list)
    attempts: list[StrategyOutcome] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    description: str = ""
