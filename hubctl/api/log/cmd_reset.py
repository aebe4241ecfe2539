"""Log reset command - empties the agent's logs and discards its state."""

import os
import shutil
from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..ControlError import ControlError
from ..StageResult import StageResult
from . import LogResetOutput
from .LogLocation import LogLocation

logger = get_logger("log.reset")


def _recreate(path: Path) -> None:
    path.unlink(missing_ok=True)
    path.touch()
    os.chmod(path, 0o644)


def cmd_reset(confirmed: bool = False) -> StageResult:
    """Reset the agent to a clean state. Destructive.

    Behavior:
    - **Not confirmed**: fails without touching anything
    - **Not root**: fails without touching anything
    - **Log directory missing**: warning, nothing is done
    - **Otherwise**: recreates the main and error logs empty (mode 0644), removes
      ``<data_dir>/data`` and, on Linux, re-registers the unit with systemd. A
      failing re-registration is a warning since the files are already reset.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.CtlConfig import CtlConfig
        from ..service._require_root import _require_root
        from ..service.Service import Service
        from ..service.ServiceDescriptor import ServiceDescriptor

        def fail(message: str, recreated: list[str] | None = None) -> None:
            result_obj.result = message
            result_obj.output = LogResetOutput(
                errors=[message],
                warnings=[],
                reset=False,
                recreated=recreated or [],
                removed=[],
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        config = CtlConfig.load()
        location = LogLocation.from_config(config.log)

        if not confirmed:
            yield (1.0, "Complete")
            fail("Reset not confirmed")
            return

        try:
            _require_root()
        except ControlError as exc:
            yield (1.0, "Complete")
            fail(str(exc))
            return

        if not location.log_dir.is_dir():
            message = f"Log directory not found: {location.log_dir}"
            yield (1.0, "Complete")
            result_obj.result = message
            result_obj.output = LogResetOutput(
                errors=[],
                warnings=[message],
                reset=False,
                recreated=[],
                removed=[],
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.3, "Recreating log files...")
        recreated: list[str] = []
        try:
            for path in (location.log_file, location.error_file):
                _recreate(path)
                recreated.append(str(path))
        except OSError as exc:
            yield (1.0, "Complete")
            fail(f"Failed to reset {path}: {exc}")
            return

        yield (0.6, "Removing agent data...")
        removed: list[str] = []
        data_path = Path(config.data_dir).expanduser() / "data"
        if data_path.exists():
            try:
                shutil.rmtree(data_path)
            except OSError as exc:
                yield (1.0, "Complete")
                fail(f"Failed to remove {data_path}: {exc}", recreated=recreated)
                return
            removed.append(str(data_path))

        yield (0.8, "Refreshing service registration...")
        warnings: list[str] = []
        descriptor = ServiceDescriptor.resolve(config.service)
        try:
            with Service(descriptor) as service:
                for command in service.refresh_registration():
                    logger.info("Ran %s", command)
        except ControlError as exc:
            warnings.append(f"Service registration not refreshed: {exc}")

        yield (1.0, "Complete")
        result_obj.result = "Service configuration reset successfully"
        result_obj.output = LogResetOutput(
            errors=[],
            warnings=warnings,
            reset=True,
            recreated=recreated,
            removed=removed,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Resetting service configuration...",
        progress_callback=do_work,
    )
