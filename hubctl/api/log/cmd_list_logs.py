"""Log list command - candidate log files with size and modification time."""

from collections.abc import Iterator

from ..ControlError import ResourceNotFoundError
from ..StageResult import StageResult
from . import LogListLogsOutput
from .locate_logs import describe_log_files
from .LogLocation import LogLocation


def cmd_list_logs() -> StageResult:
    """List log files, oldest first.

    A missing directory and an empty one are reported with different warnings.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.CtlConfig import CtlConfig

        yield (0.1, "Loading configuration...")
        config = CtlConfig.load()
        location = LogLocation.from_config(config.log)

        yield (0.5, "Listing log files...")
        warnings: list[str] = []
        try:
            infos = describe_log_files(location)
        except ResourceNotFoundError as exc:
            infos = []
            warnings.append(str(exc))
        else:
            if not infos:
                warnings.append("No log files found")

        yield (1.0, "Complete")
        result_obj.result = warnings[0] if warnings else f"Log files in {location.log_dir}:"
        result_obj.output = LogListLogsOutput(
            errors=[],
            warnings=warnings,
            log_dir=str(location.log_dir),
            found=bool(infos),
            files=[info.to_dict() for info in infos],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing log files...",
        progress_callback=do_work,
    )
