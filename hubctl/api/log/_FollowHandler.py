"""Filesystem event handler feeding followed log paths into a queue."""

import queue
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler


class _FollowHandler(FileSystemEventHandler):
    """Queues the path of every followed file that changes.

    ``accept`` admits paths that are not followed yet, such as a log file
    created by rotation while following every file.
    """

    def __init__(
        self,
        events: "queue.Queue[Path]",
        followed: set[Path],
        accept: Callable[[Path], bool] | None = None,
    ) -> None:
        super().__init__()
        self._events = events
        self._followed = followed
        self._accept = accept

    def _offer(self, raw_path: str | bytes) -> None:
        if isinstance(raw_path, bytes):
            raw_path = raw_path.decode(errors="replace")
        path = Path(raw_path)
        if path in self._followed or (self._accept is not None and self._accept(path)):
            self._events.put(path)

    def on_modified(self, event: FileSystemEvent) -> None:  # pragma: no cover
        if not event.is_directory:
            self._offer(event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:  # pragma: no cover
        if not event.is_directory:
            self._offer(event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:  # pragma: no cover
        if not event.is_directory:
            self._offer(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:  # pragma: no cover
        if not event.is_directory:
            self._offer(event.src_path)
            self._offer(event.dest_path)
