"""Background watching of the opened folder for changes."""

from __future__ import annotations

import os
import queue
import threading
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class _Forwarder(FileSystemEventHandler):
    def __init__(self, events: queue.Queue[FileSystemEvent]) -> None:
        super().__init__()
        self._events = events

    def on_any_event(self, event: FileSystemEvent) -> None:
        self._events.put(event)


class FileWatcher:
    """Watches one folder recursively and queues its change events."""

    def __init__(self) -> None:
        self._events: queue.Queue[FileSystemEvent] = queue.Queue()
        self._handler = _Forwarder(self._events)
        self._observer = Observer()
        self._observer.daemon = True
        self._watch = None
        self._current_path: Path | None = None
        self._lock = threading.Lock()
        self._stopped = False
        self._observer.start()

    @property
    def current_path(self) -> Path | None:
        """The folder being watched, if any."""
        return self._current_path

    def change_path(self, new_path: str | os.PathLike[str]) -> None:
        """Stop watching the current folder and watch ``new_path`` instead."""
        with self._lock:
            if self._stopped:
                return
            if self._watch is not None:
                self._observer.unschedule(self._watch)
                self._watch = None
            path = Path(new_path)
            self._watch = self._observer.schedule(
                self._handler, str(path), recursive=True
            )
            self._current_path = path

    def poll_events(self) -> list[FileSystemEvent]:
        """Return every event received since the last poll."""
        drained: list[FileSystemEvent] = []
        while True:
            try:
                drained.append(self._events.get_nowait())
            except queue.Empty:
                return drained

    def stop(self) -> None:
        """Stop watching and wait for the background thread to finish."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            if self._watch is not None:
                self._observer.unschedule(self._watch)
                self._watch = None
            self._current_path = None
        self._observer.stop()
        self._observer.join()

    def __enter__(self) -> FileWatcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()