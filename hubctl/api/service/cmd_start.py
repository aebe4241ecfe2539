"""Service start command - activates the agent through the native service manager."""

from collections.abc import Iterator

from ...constants import SERVICE_NAME
from ..ControlError import ControlError
from ..StageResult import StageResult
from . import ServiceStartOutput
from ._require_root import _require_root
from .Service import Service
from .ServiceDescriptor import ServiceDescriptor


def cmd_start() -> StageResult:
    """Start the agent via systemd or launchd.

    Behavior:
    - **Platform unsupported**: fails before any privilege check
    - **Not root**: fails before touching the service manager
    - **Already active/loaded**: warning, no native call, success
    - **Otherwise**: ``systemctl start`` / ``launchctl load -w``; success only if it succeeds
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
                if service.is_active():
                    changed = False
                    message = f"Service is already {service.active_word}"
                    warnings.append(message)
                else:
                    yield (0.6, "Starting via service manager...")
                    service.start()
                    changed = True
                    message = "Service started"
        except ControlError as exc:
            yield (1.0, "Complete")
            result_obj.result = str(exc)
            result_obj.output = ServiceStartOutput(
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
        result_obj.output = ServiceStartOutput(
            errors=[],
            warnings=warnings,
            service=descriptor.identifier,
            platform=descriptor.platform,
            changed=changed,
            running=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Starting {SERVICE_NAME}...",
        progress_callback=do_work,
    )
