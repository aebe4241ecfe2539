"""Log errors command - last N lines of the agent's error log."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import LogErrorsOutput
from .LogLocation import LogLocation
from .tail_lines import tail_lines


def cmd_errors(lines: int | None = None) -> StageResult:
    """Show the last ``lines`` lines of the fixed error log. No fallback."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.CtlConfig import CtlConfig

        yield (0.1, "Loading configuration...")
        config = CtlConfig.load()
        count = lines if lines is not None else config.log.default_lines
        location = LogLocation.from_config(config.log)

        yield (0.5, "Reading error log...")
        if not location.error_file.is_file():
            message = f"Error log not found: {location.error_file}"
            yield (1.0, "Complete")
            result_obj.result = message
            result_obj.output = LogErrorsOutput(
                errors=[],
                warnings=[message],
                source="",
                files=[],
                lines=[],
            ).model_dump(mode="python")
            result_obj.success = True
            return

        output_lines = tail_lines([location.error_file], count)
        yield (1.0, "Complete")
        result_obj.result = f"Showing errors from {location.error_file}:"
        result_obj.output = LogErrorsOutput(
            errors=[],
            warnings=[],
            source="file",
            files=[str(location.error_file)],
            lines=output_lines,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Reading error log...",
        progress_callback=do_work,
    )
