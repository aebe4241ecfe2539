"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from typing import Any, TypeVar

import typer

from ..api.validate_output import validate_output
from ..utils.logger import get_logger
from ._printers import get_text_printer
from .display.Display import Display

F = TypeVar("F", bound=Callable)

logger = get_logger("cli")


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once and display result.

    Stage 1 (Announce) must happen IMMEDIATELY before any work starts.
    Commands must handle all expected failures internally and report them
    via their domain-specific output schema.

    Raises:
        typer.Exit: Always; 0 on success, 1 otherwise
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        logger.debug("Progress: %s (%.0f%%)", message, progress_percent * 100)

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        # Validation failure is a programming error - fail loudly
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    warnings: list[str] = result.output.get("warnings", [])
    for warning in warnings:
        display.warning(warning)
    if result.success:
        if result.result not in warnings:
            display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if display_format == "text":
        printer = result_printer or get_text_printer(func.__name__.removeprefix("cmd_"), display)
        printer(result.output)
    else:
        display.json_output(result.output, format=display_format)

    raise typer.Exit(0 if result.success else 1)
