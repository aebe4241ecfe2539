"""Service status command - native status plus PID file liveness."""

from collections.abc import Iterator

from ...constants import SERVICE_NAME
from ..ControlError import ControlError
from ..StageResult import StageResult
from . import ServiceStatusOutput
from .Service import Service
from .ServiceDescriptor import ServiceDescriptor


def cmd_status() -> StageResult:
    """Report whether the agent is active. Needs no privilege.

    An inactive service is a successful status query, not an error.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.CtlConfig import CtlConfig

        yield (0.1, "Loading configuration...")
        config = CtlConfig.load()
        descriptor = ServiceDescriptor.resolve(config.service)

        try:
            with Service(descriptor) as service:
                yield (0.5, "Querying service manager...")
                report = service.status()
                active_word = service.active_word
        except ControlError as exc:
            yield (1.0, "Complete")
            result_obj.result = str(exc)
            result_obj.output = ServiceStatusOutput(
                errors=[str(exc)],
                warnings=[],
                service=descriptor.identifier,
                platform=descriptor.platform,
                active=False,
                pid=-1,
                pid_state="",
                detail=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings: list[str] = []
        if report.pid_state == "stale":
            warnings.append(f"PID file {descriptor.pid_file} points to a dead process ({report.pid})")

        yield (1.0, "Complete")
        result_obj.result = f"Service is {active_word}" if report.active else f"Service is not {active_word}"
        result_obj.output = ServiceStatusOutput(
            errors=[],
            warnings=warnings,
            service=descriptor.identifier,
            platform=descriptor.platform,
            active=report.active,
            pid=report.pid if report.pid is not None else -1,
            pid_state=report.pid_state,
            detail=report.detail,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Status of {SERVICE_NAME}:",
        progress_callback=do_work,
    )
