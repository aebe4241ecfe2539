"""Service reload command - asks the agent to reopen its log files (SIGHUP)."""

import signal
from collections.abc import Iterator

from ...constants import SERVICE_NAME
from ..ControlError import ControlError
from ..StageResult import StageResult
from . import ServiceReloadOutput
from ._require_root import _require_root
from .Service import Service
from .ServiceDescriptor import ServiceDescriptor


def cmd_reload() -> StageResult:
    """Deliver SIGHUP to the agent.

    systemd signals the unit's main process. launchd tries the PID file, then a
    process table search, and fails with "Process not found" when both miss.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.CtlConfig import CtlConfig

        yield (0.1, "Loading configuration...")
        config = CtlConfig.load()
        descriptor = ServiceDescriptor.resolve(config.service)

        try:
            with Service(descriptor) as service:
                _require_root()
                yield (0.5, "Sending SIGHUP...")
                delivery = service.send_signal(signal.SIGHUP)
        except ControlError as exc:
            yield (1.0, "Complete")
            result_obj.result = str(exc)
            result_obj.output = ServiceReloadOutput(
                errors=[str(exc)],
                warnings=[],
                service=descriptor.identifier,
                platform=descriptor.platform,
                signalled=False,
                strategy="",
                pid=-1,
                attempts=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if delivery.delivered:
            target = f"PID {delivery.pid}" if delivery.pid is not None else descriptor.identifier
            result_obj.result = f"Sent SIGHUP to {target} (via {delivery.strategy}); log files will be reopened"
        else:
            result_obj.result = delivery.error
        result_obj.output = ServiceReloadOutput(
            errors=[] if delivery.delivered else [delivery.error],
            warnings=[],
            service=descriptor.identifier,
            platform=descriptor.platform,
            signalled=delivery.delivered,
            strategy=delivery.strategy,
            pid=delivery.pid if delivery.pid is not None else -1,
            attempts=[attempt.to_dict() for attempt in delivery.attempts],
        ).model_dump(mode="python")
        result_obj.success = delivery.delivered

    return StageResult(
        announce=f"Reloading {SERVICE_NAME} log files...",
        progress_callback=do_work,
    )
