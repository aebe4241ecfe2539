"""Record of one attempt in an ordered fallback chain."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class StrategyOutcome:
    """Which strategy was tried, whether it satisfied the request, and why."""

    strategy: str
    satisfied: bool
    detail: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
