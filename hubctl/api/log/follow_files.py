"""Stream content appended to one or more files until told to stop."""

import os
import queue
import threading
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from watchdog.observers import Observer

from ...utils.logger import get_logger
from ._FollowHandler import _FollowHandler

logger = get_logger("log.follow")


def _real(path: Path) -> Path:
    return Path(os.path.realpath(path))


def _identity(path: Path) -> tuple[int, int] | None:
    """(inode, size) of ``path``, or None when it does not exist."""
    try:
        stat = path.stat()
    except FileNotFoundError:
        return None
    return stat.st_ino, stat.st_size


def snapshot_offsets(paths: Iterable[Path]) -> dict[Path, int]:
    """Current size of each of ``paths`` (0 when missing), keyed as given."""
    offsets: dict[Path, int] = {}
    for path in paths:
        identity = _identity(path)
        offsets[path] = identity[1] if identity else 0
    return offsets


def follow_files(
    paths: Iterable[Path],
    write: Callable[[str], object],
    poll_secs: float = 0.5,
    stop: threading.Event | None = None,
    headers: bool = False,
    accept: Callable[[Path], bool] | None = None,
    start_offsets: Mapping[Path, int] | None = None,
) -> None:
    """Write everything appended to ``paths`` from now on.

    Reading starts at each file's current end, or at its entry in
    ``start_offsets`` when one is given. A file whose size shrinks was
    truncated and is re-read from offset 0. A deleted file is skipped until a
    file appears again at the same path. ``accept`` admits newly created files
    (read from the start). With ``headers`` each switch between files is marked
    ``==> path <==`` like ``tail -f``.

    A watchdog observer on the parent directories feeds changed paths into one
    queue; the calling thread is the only writer. When no event arrives within
    ``poll_secs`` every file is re-checked anyway.

    Runs until ``stop`` is set or the caller interrupts it (KeyboardInterrupt
    propagates).
    """
    offsets: dict[Path, int] = {}
    inodes: dict[Path, int] = {}
    for path in paths:
        real = _real(path)
        identity = _identity(real)
        if start_offsets is not None and path in start_offsets:
            offsets[real] = start_offsets[path]
        else:
            offsets[real] = identity[1] if identity else 0
        if identity:
            inodes[real] = identity[0]

    events: queue.Queue[Path] = queue.Queue()
    followed = set(offsets)
    handler = _FollowHandler(events, followed, accept)

    observer = Observer()
    for directory in sorted({path.parent for path in offsets}):
        if directory.is_dir():
            observer.schedule(handler, str(directory), recursive=False)
        else:
            logger.debug("Not watching missing directory %s", directory)
    observer.start()

    last_written: list[Path | None] = [None]

    def drain(path: Path) -> None:
        identity = _identity(path)
        if identity is None:
            offsets[path] = 0
            inodes.pop(path, None)
            return
        inode, size = identity
        offset = offsets.get(path, 0)
        if inodes.get(path, inode) != inode:
            logger.debug("%s was replaced, reading from the start", path)
            offset = 0
        inodes[path] = inode
        if size < offset:
            logger.debug("%s was truncated, reading from the start", path)
            offset = 0
        if size == offset:
            offsets[path] = offset
            return
        try:
            with path.open("rb") as fh:
                fh.seek(offset)
                data = fh.read()
        except FileNotFoundError:
            offsets[path] = 0
            return
        offsets[path] = offset + len(data)
        if headers and last_written[0] != path:
            write(f"\n==> {path} <==\n")
        last_written[0] = path
        write(data.decode("utf-8", errors="replace"))

    try:
        while stop is None or not stop.is_set():
            pending: set[Path] = set()
            try:
                pending.add(events.get(timeout=poll_secs))
            except queue.Empty:
                pending.update(offsets)
            while True:
                try:
                    pending.add(events.get_nowait())
                except queue.Empty:
                    break

            for path in sorted(pending):
                if path not in offsets:
                    # Newly admitted file: followed from its first byte
                    offsets[path] = 0
                    followed.add(path)
                drain(path)
    finally:
        observer.stop()
        observer.join()
