"""Last N lines of one or more files, read as a single stream."""

from collections import deque
from collections.abc import Iterable, Mapping
from pathlib import Path


def tail_lines(paths: Iterable[Path], count: int, ends: Mapping[Path, int] | None = None) -> list[str]:
    """Return the last ``count`` lines of the concatenation of ``paths``.

    Files are read in the given order as if by ``cat``: a file that does not
    end in a newline runs into the first line of the next one. Files that
    vanish before they are read are skipped. Lines are returned without their
    trailing newline.

    ``ends`` caps how many bytes of a file are read, so a caller that follows
    the files afterwards can resume exactly where the tail stopped.
    """
    if count <= 0:
        return []

    window: deque[str] = deque(maxlen=count)
    carry = ""
    for path in paths:
        remaining = ends.get(path) if ends is not None else None
        try:
            with path.open("rb") as fh:
                for raw in fh:
                    if remaining is not None:
                        if remaining <= 0:
                            break
                        raw = raw[:remaining]
                        remaining -= len(raw)
                    line = raw.decode("utf-8", errors="replace")
                    if carry:
                        line = carry + line
                        carry = ""
                    if line.endswith("\n"):
                        window.append(line.rstrip("\r\n"))
                    else:
                        carry = line
        except FileNotFoundError:
            continue
    if carry:
        window.append(carry)
    return list(window)
