"""Application state and the queue of user-requested events."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ps2suitcase.files import Files, VirtualFile


class EventKind(enum.Enum):
    """The kinds of action the user can request."""

    OPEN_FOLDER = enum.auto()
    OPEN_FILE = enum.auto()
    SET_TITLE = enum.auto()
    ADD_FILES = enum.auto()
    EXPORT_PSU = enum.auto()
    SAVE_FILE = enum.auto()
    OPEN_SAVE = enum.auto()
    CREATE_ICN = enum.auto()
    CREATE_TITLE_CFG = enum.auto()
    OPEN_SETTINGS = enum.auto()
    START_PCSX2 = enum.auto()
    START_PCSX2_ELF = enum.auto()
    VALIDATE = enum.auto()


@dataclass(frozen=True)
class AppEvent:
    """A queued event and its optional payload."""

    kind: EventKind
    payload: Any = None


@dataclass
class AppState:
    """Shared state of the workspace."""

    opened_folder: Path | None = None
    files: Files = field(default_factory=Files)
    events: list[AppEvent] = field(default_factory=list)
    pcsx2_path: str = ""

    def _push(self, kind: EventKind, payload: Any = None) -> None:
        self.events.append(AppEvent(kind, payload))

    def open_file(self, file: VirtualFile) -> None:
        self._push(EventKind.OPEN_FILE, file)

    def set_title(self, title: str) -> None:
        self._push(EventKind.SET_TITLE, title)

    def add_files(self) -> None:
        self._push(EventKind.ADD_FILES)

    def open_folder(self) -> None:
        self._push(EventKind.OPEN_FOLDER)

    def open_save(self) -> None:
        self._push(EventKind.OPEN_SAVE)

    def export_psu(self) -> None:
        self._push(EventKind.EXPORT_PSU)

    def save_file(self) -> None:
        self._push(EventKind.SAVE_FILE)

    def create_icn(self) -> None:
        self._push(EventKind.CREATE_ICN)

    def create_title_cfg(self) -> None:
        self._push(EventKind.CREATE_TITLE_CFG)

    def open_settings(self) -> None:
        self._push(EventKind.OPEN_SETTINGS)

    def start_pcsx2(self) -> None:
        self._push(EventKind.START_PCSX2)

    def start_pcsx2_elf(self, path: str | os.PathLike[str]) -> None:
        self._push(EventKind.START_PCSX2_ELF, Path(path))

    def validate(self) -> None:
        self._push(EventKind.VALIDATE)

    def drain_events(self) -> list[AppEvent]:
        """Remove and return all queued events in order."""
        drained, self.events = self.events, []
        return drained