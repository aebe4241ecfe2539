"""Linux service implementation - controls the agent as a systemd system unit."""

import signal

from ...ControlError import NativeManagerError
from ...StrategyOutcome import StrategyOutcome
from .._AbstractImpl import _AbstractImpl
from .._run_native import _run_native
from ..ProcessHandle import ProcessHandle
from ..ServiceStatusReport import ServiceStatusReport
from ..SignalDelivery import SignalDelivery


class _Impl(_AbstractImpl):
    """Linux-specific service implementation using systemctl."""

    active_word = "running"

    @property
    def unit(self) -> str:
        return self.descriptor.identifier

    def is_active(self) -> bool:
        completed = _run_native(["systemctl", "is-active", "--quiet", self.unit], check=False)
        return completed.returncode == 0

    def start(self) -> None:
        _run_native(["systemctl", "start", self.unit])

    def stop(self) -> None:
        _run_native(["systemctl", "stop", self.unit])

    def restart(self) -> None:
        _run_native(["systemctl", "restart", self.unit])

    def status(self) -> ServiceStatusReport:
        """Native status output, verbatim.

        ``systemctl status`` exits non-zero for inactive units; that is reported,
        not raised.
        """
        completed = _run_native(["systemctl", "status", self.unit, "--no-pager"], check=False)
        text = completed.stdout if completed.stdout.strip() else (completed.stderr or "")
        report = ServiceStatusReport(active=self.is_active(), detail=text.rstrip("\n").splitlines())

        handle = ProcessHandle.from_pid_file(self.descriptor.pid_file)
        if handle is not None:
            report.pid = handle.pid
            report.pid_state = "running" if handle.alive else "stale"
        return report

    def send_signal(self, signum: int = signal.SIGHUP) -> SignalDelivery:
        """Ask systemd to signal the unit's main process."""
        if not self.is_active():
            message = "Service is not running"
            return SignalDelivery(
                delivered=False,
                error=message,
                attempts=[StrategyOutcome("systemd", False, message)],
            )

        signame = signal.Signals(signum).name
        try:
            _run_native(["systemctl", "kill", "--kill-whom=main", f"--signal={signame}", self.unit])
        except NativeManagerError as exc:
            return SignalDelivery(
                delivered=False,
                error=str(exc),
                attempts=[StrategyOutcome("systemd", False, str(exc))],
            )

        handle = ProcessHandle.from_pid_file(self.descriptor.pid_file)
        pid = handle.pid if handle is not None and handle.alive else None
        return SignalDelivery(
            delivered=True,
            strategy="systemd",
            pid=pid,
            attempts=[StrategyOutcome("systemd", True, f"{signame} sent to main process of {self.unit}")],
        )

    def refresh_registration(self) -> list[str]:
        commands = [
            ["systemctl", "daemon-reload"],
            ["systemctl", "enable", self.unit],
        ]
        for command in commands:
            _run_native(command)
        return [" ".join(command) for command in commands]
