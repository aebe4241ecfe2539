"""Plain-text renderers for ``--display text``."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from ..constants import DEFAULT_TIMESTAMP_FORMAT
from ..utils.human_size import human_size
from .display.Display import Display


def _lines_printer(display: Display) -> Callable[[dict[str, Any]], None]:
    def printer(output: dict[str, Any]) -> None:
        if output["lines"]:
            display.text_output("\n".join(output["lines"]))

    return printer


def _status_printer(display: Display) -> Callable[[dict[str, Any]], None]:
    def printer(output: dict[str, Any]) -> None:
        if output["detail"]:
            display.text_output("\n".join(output["detail"]))

    return printer


def _list_logs_printer(display: Display) -> Callable[[dict[str, Any]], None]:
    def printer(output: dict[str, Any]) -> None:
        rows = []
        for entry in output["files"]:
            modified = datetime.fromisoformat(entry["modified"]).strftime(DEFAULT_TIMESTAMP_FORMAT)
            rows.append(f"{human_size(entry['size']):>6}  {modified}  {entry['path']}")
        if rows:
            display.text_output("\n".join(rows))

    return printer


def _silent_printer(display: Display) -> Callable[[dict[str, Any]], None]:  # noqa: ARG001
    def printer(output: dict[str, Any]) -> None:  # noqa: ARG001
        return None

    return printer


# Command name -> factory of the text printer for its output
TEXT_PRINTERS: dict[str, Callable[[Display], Callable[[dict[str, Any]], None]]] = {
    "logs": _lines_printer,
    "errors": _lines_printer,
    "status": _status_printer,
    "list_logs": _list_logs_printer,
}


def get_text_printer(command_name: str, display: Display) -> Callable[[dict[str, Any]], None]:
    """Text printer for ``command_name`` (the ``cmd_`` function name without prefix)."""
    return TEXT_PRINTERS.get(command_name, _silent_printer)(display)
