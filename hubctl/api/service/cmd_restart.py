"""Service restart command."""

from collections.abc import Iterator

from ...constants import SERVICE_NAME
from ..ControlError import ControlError
from ..StageResult import StageResult
from . import ServiceRestartOutput
from ._require_root import _require_root
from .Service import Service
from .ServiceDescriptor import ServiceDescriptor


def cmd_restart() -> StageResult:
    """Restart the agent; a stopped service is simply started."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.CtlConfig import CtlConfig

        yield (0.1, "Loading configuration...")
        config = CtlConfig.load()
        descriptor = ServiceDescriptor.resolve(config.service)

        try:
            with Service(descriptor) as service:
                _require_root()
                yield (0.5, "Restarting via service manager...")
                service.restart()
        except ControlError as exc:
            yield (1.0, "Complete")
            result_obj.result = str(exc)
            result_obj.output = ServiceRestartOutput(
                errors=[str(exc)],
                warnings=[],
                service=descriptor.identifier,
                platform=descriptor.platform,
                restarted=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "Service restarted"
        result_obj.output = ServiceRestartOutput(
            errors=[],
            warnings=[],
            service=descriptor.identifier,
            platform=descriptor.platform,
            restarted=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Restarting {SERVICE_NAME}...",
        progress_callback=do_work,
    )
