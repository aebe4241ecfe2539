"""macOS service implementation - controls the agent as a launchd daemon."""

import os
import signal
import time

from ...StrategyOutcome import StrategyOutcome
from .._AbstractImpl import _AbstractImpl
from .._run_native import _run_native
from ..find_process import find_process
from ..ProcessHandle import ProcessHandle
from ..ServiceStatusReport import ServiceStatusReport
from ..SignalDelivery import SignalDelivery
from ....utils.logger import get_logger

logger = get_logger("service.darwin")


class _Impl(_AbstractImpl):
    """macOS-specific service implementation using launchctl load/unload."""

    active_word = "loaded"

    @property
    def label(self) -> str:
        return self.descriptor.identifier

    def _list_entry(self) -> str | None:
        """Return the ``launchctl list`` line for our label, if loaded."""
        completed = _run_native(["launchctl", "list"])
        for line in completed.stdout.splitlines():
            fields = line.split()
            if fields and fields[-1] == self.label:
                return line
        return None

    def is_active(self) -> bool:
        return self._list_entry() is not None

    def start(self) -> None:
        _run_native(["launchctl", "load", "-w", str(self.descriptor.plist_path)])

    def stop(self) -> None:
        _run_native(["launchctl", "unload", str(self.descriptor.plist_path)])

    def restart(self) -> None:
        """Unload (when loaded), pause, then load again."""
        if self.is_active():
            self.stop()
            time.sleep(self.descriptor.restart_delay_secs)
        self.start()

    def status(self) -> ServiceStatusReport:
        """Reconstruct a status report from launchctl and the PID file."""
        entry = self._list_entry()
        if entry is None:
            return ServiceStatusReport(active=False, detail=["Service: not loaded"])

        report = ServiceStatusReport(active=True, detail=["Service: loaded", entry.strip()])
        handle = ProcessHandle.from_pid_file(self.descriptor.pid_file)
        if handle is not None:
            report.pid = handle.pid
            report.pid_state = "running" if handle.alive else "stale"
            suffix = "running" if handle.alive else "stale pid file"
            report.detail.append(f"PID: {handle.pid} ({suffix})")
        return report

    def send_signal(self, signum: int = signal.SIGHUP) -> SignalDelivery:
        """PID file first, then a process table search."""
        delivery = SignalDelivery(delivered=False)

        handle = ProcessHandle.from_pid_file(self.descriptor.pid_file)
        if handle is None:
            delivery.attempts.append(StrategyOutcome("pid_file", False, f"No usable PID file at {self.descriptor.pid_file}"))
        elif not handle.alive:
            delivery.attempts.append(StrategyOutcome("pid_file", False, f"PID {handle.pid} is not running"))
        elif self._kill(handle.pid, signum, delivery, "pid_file"):
            return delivery

        pid = find_process(self.descriptor.process_pattern)
        if pid is None:
            delivery.attempts.append(StrategyOutcome("process_search", False, "No matching process"))
        elif self._kill(pid, signum, delivery, "process_search"):
            return delivery

        delivery.error = "Process not found"
        return delivery

    @staticmethod
    def _kill(pid: int, signum: int, delivery: SignalDelivery, strategy: str) -> bool:
        try:
            os.kill(pid, signum)
        except OSError as exc:
            logger.debug("Signal to PID %s failed: %s", pid, exc)
            delivery.attempts.append(StrategyOutcome(strategy, False, f"kill {pid} failed: {exc}"))
            return False
        delivery.delivered = True
        delivery.strategy = strategy
        delivery.pid = pid
        delivery.attempts.append(StrategyOutcome(strategy, True, f"Signal sent to PID {pid}"))
        return True
