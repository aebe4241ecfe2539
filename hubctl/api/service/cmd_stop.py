"""Service stop command - deactivates the agent through the native service manager."""

from collections.abc import Iterator

from ...constants import SERVICE_NAME
from ..ControlError import ControlError
from ..StageResult import StageResult
from . import ServiceStopOutput
from ._require_root import _require_root
from .Service import Service
from .ServiceDescriptor import ServiceDescriptor


def cmd_stop() -> StageResult:
    """Stop the agent via systemd or launchd.

    Idempotent: a service that is not active/loaded yields a warning and no
    native call.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.CtlConfig import CtlConfig

        yield (0.1, "Loading configuration...")
        config = CtlConfig.load()
        descriptor = ServiceDescriptor.resolve(config.service)

        warnings: list[str] = []
        try:
            with Service(descriptor) as service:
                _require_root()
                yield (0.3, "Checking service state...")
                if not service.is_active():
                    changed = False
                    message = f"Service is not {service.active_word}"
                    warnings.append(message)
                else:
                    yield (0.6, "Stopping via service manager...")
                    service.stop()
                    changed = True
                    message = "Service stopped"
        except ControlError as exc:
            yield (1.0, "Complete")
            result_obj.result = str(exc)
            result_obj.output = ServiceStopOutput(
                errors=[str(exc)],
                warnings=[],
                service=descriptor.identifier,
                platform=descriptor.platform,
                changed=False,
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = message
        result_obj.output = ServiceStopOutput(
            errors=[],
            warnings=warnings,
            service=descriptor.identifier,
            platform=descriptor.platform,
            changed=changed,
            running=False,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Stopping {SERVICE_NAME}...",
        progress_callback=do_work,
    )
