"""CLI display implementation using Rich library."""

import json
import sys
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console
from rich.markup import escape

from .Display import Display


class CLIDisplay(Display):
    """Status lines with ▶ ✔ ⚠ ✗ indicators on stderr, payload on stdout."""

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr, highlight=False, soft_wrap=True)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[blue]▶[/blue] {escape(message)}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[green]✔[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(escape(message))

    def text_output(self, text: str, **kwargs) -> None:  # noqa: ARG002
        # Raw write: log lines must not be re-wrapped or interpreted as markup
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "json")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            rendered = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()
        else:
            rendered = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = JsonLexer()

        if sys.stdout.isatty():
            print(highlight(rendered, lexer, Terminal256Formatter(style="monokai")), end="")
        else:
            print(rendered, end="")
