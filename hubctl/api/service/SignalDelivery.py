"""Outcome of delivering a signal to the agent."""

from dataclasses import dataclass, field

from ..StrategyOutcome import StrategyOutcome


@dataclass
class SignalDelivery:
    """Which strategy delivered the signal, to which PID, after which attempts."""

    delivered: bool
    strategy: str = ""
    pid: int | None = None
    error: str = ""
    attempts: list[StrategyOutcome] = field(default_factory=list)
