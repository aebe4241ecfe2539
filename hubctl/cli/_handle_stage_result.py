"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format from the given Typer context chain.

    Raises:
        RuntimeError: If no context is given or the flag was never set.
        ValueError: If an invalid display format value is encountered.
    """
    if ctx is None:
        raise RuntimeError("Display format unavailable: Typer context is missing")

    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in DISPLAY_FORMATS:
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def _handle_stage_result(
    func: F,
    result_printer: Callable[[dict], None] | None = None,
) -> Callable[..., None]:
    """Wrap a command function to handle StageResult for CLI display.

    The wrapper takes the invoking ``typer.Context`` first; the display format
    is read from its chain rather than from a global current context.

    1. Announce (stderr)
    2. Progress (debug log)
    3. Result with warnings (stderr)
    4. Output (stdout: plain text, JSON or YAML)
    """

    @functools.wraps(func)
    def wrapper(ctx: typer.Context | None, *args, **kwargs):
        from .display import get_display

        display = get_display()

        try:
            display_format = _extract_display_format(ctx)
        except (RuntimeError, ValueError):
            display_format = "text"

        _run_single_execution(func, args, kwargs, display, display_format, result_printer)

    return wrapper
