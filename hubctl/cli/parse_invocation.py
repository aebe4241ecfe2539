"""Lenient per-invocation parsing of log viewing flags."""

from collections.abc import Sequence
from dataclasses import dataclass

from ..constants import DEFAULT_LINES


@dataclass(frozen=True)
class ParsedInvocation:
    subcommand: str
    follow: bool = False
    lines: int = DEFAULT_LINES
    all_files: bool = False


def _parse_count(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        count = int(value)
    except ValueError:
        return None
    return count if count > 0 else None


def parse_invocation(
    subcommand: str,
    tokens: Sequence[str],
    default_lines: int = DEFAULT_LINES,
) -> tuple[ParsedInvocation, list[str]]:
    """Parse ``-f/--follow``, ``-n/--lines N`` and ``-a/--all``.

    Unknown tokens are skipped. ``-n`` consumes the next token; a missing,
    non-numeric or non-positive count falls back to ``default_lines`` with a
    warning. ``-a`` only applies to ``logs``.

    Returns:
        The parsed invocation and the warnings to show the user
    """
    follow = False
    all_files = False
    lines = default_lines
    warnings: list[str] = []

    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        raw: str | None
        if token in ("-f", "--follow"):
            follow = True
            continue
        if token in ("-a", "--all"):
            all_files = subcommand == "logs"
            continue
        if token in ("-n", "--lines"):
            raw = tokens[index] if index < len(tokens) else None
            index += 1
        elif token.startswith("--lines="):
            raw = token.split("=", 1)[1]
        else:
            continue

        count = _parse_count(raw)
        if count is None:
            warnings.append(f"Invalid line count {raw!r}, using default of {default_lines}")
            lines = default_lines
        else:
            lines = count

    return ParsedInvocation(subcommand=subcommand, follow=follow, lines=lines, all_files=all_files), warnings
