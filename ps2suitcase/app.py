"""The workspace: an opened save folder, its editors and its event handling."""

from __future__ import annotations

import argparse
import enum
import json
import os
import shutil
import subprocess
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePath

from ps2suitcase.files import VirtualFile, read_folder
from ps2suitcase.state import AppEvent, AppState, EventKind
from ps2suitcase.system import validate
from ps2suitcase.watcher import FileWatcher

APP_NAME = "PS2Suitcase"
_MACOS_EXECUTABLE = "/Contents/MacOS/PCSX2"


class EditorKind(enum.Enum):
    """The editors a workspace file can be opened in."""

    ICN_VIEWER = "icn"
    ICON_SYS_VIEWER = "icon_sys"
    TITLE_CFG_VIEWER = "title_cfg"


_EDITORS_BY_EXTENSION = {
    "icn": EditorKind.ICN_VIEWER,
    "ico": EditorKind.ICN_VIEWER,
    "sys": EditorKind.ICON_SYS_VIEWER,
    "cfg": EditorKind.TITLE_CFG_VIEWER,
    "cnf": EditorKind.TITLE_CFG_VIEWER,
    "dat": EditorKind.TITLE_CFG_VIEWER,
    "txt": EditorKind.TITLE_CFG_VIEWER,
}


def editor_kind_for(filename: str | os.PathLike[str]) -> EditorKind | None:
    """Return the editor for a file name, or ``None`` if none applies."""
    suffix = PurePath(filename).suffix
    if not suffix:
        return None
    return _EDITORS_BY_EXTENSION.get(suffix[1:].lower())


def pcsx2_command(
    pcsx2_path: str,
    elf: str | os.PathLike[str] | None = None,
    platform: str | None = None,
) -> list[str]:
    """Return the command line that starts PCSX2, booting ``elf`` if given."""
    platform = sys.platform if platform is None else platform
    executable = pcsx2_path + _MACOS_EXECUTABLE if platform == "darwin" else pcsx2_path
    if elf is None:
        return [executable, "-bios"]
    return [executable, "--", os.fspath(elf)]


def launch_pcsx2(
    pcsx2_path: str, elf: str | os.PathLike[str] | None = None
) -> subprocess.Popen:
    """Start PCSX2 in the background; ``OSError`` if it cannot be started."""
    return subprocess.Popen(pcsx2_command(pcsx2_path, elf))


@dataclass
class WorkspaceSave:
    """What a workspace remembers between sessions."""

    opened_folder: Path | None = None
    pcsx2_path: str = ""


@dataclass
class _Tab:
    kind: EditorKind
    file: VirtualFile

    @property
    def title(self) -> str:
        return self.file.name


class Workspace:
    """An opened save folder with its open editors and pending events."""

    def __init__(self, storage_path: str | os.PathLike[str] | None = None) -> None:
        self.storage_path = Path(storage_path) if storage_path is not None else None
        self.state = AppState()
        self.title = APP_NAME
        self.tabs: list[_Tab] = []
        self.active_tab: int | None = None
        self.show_create_icn = False
        self.show_settings = False
        self._watcher: FileWatcher | None = None

    def _require_folder(self) -> Path:
        if self.state.opened_folder is None:
            raise RuntimeError("no folder is opened")
        return self.state.opened_folder

    def open_folder(self, folder: str | os.PathLike[str]) -> None:
        """Open ``folder``, read its files and start watching it."""
        path = Path(folder)
        files = read_folder(path)
        self.state.opened_folder = path
        self.state.set_title(path.name)
        if self._watcher is None:
            self._watcher = FileWatcher()
        self._watcher.change_path(path)
        self.state.files = files

    def add_files(self, paths: Iterable[str | os.PathLike[str]]) -> None:
        """Copy files into the opened folder and add them to the workspace."""
        folder = self._require_folder()
        for source in map(Path, paths):
            target = folder / source.name
            shutil.copyfile(source, target)
            self.state.files.add_file(target)

    def refresh(self) -> None:
        """Read the opened folder's files again."""
        self.state.files = read_folder(self._require_folder())

    def _open(self, file: VirtualFile) -> None:
        for index, tab in enumerate(self.tabs):
            if tab.title == file.name:
                self.active_tab = index
                return
        kind = editor_kind_for(file.name)
        if kind is not None:
            self.tabs.append(_Tab(kind, file))
            self.active_tab = len(self.tabs) - 1

    def handle_events(self) -> list[AppEvent]:
        """Process queued events and folder changes.

        Events that need the user interface (dialogs, exporting, saving an
        editor) are returned in order for the front end to handle.
        """
        unhandled: list[AppEvent] = []
        for event in self.state.drain_events():
            kind = event.kind
            if kind is EventKind.OPEN_FILE:
                self._open(event.payload)
            elif kind is EventKind.SET_TITLE:
                self.title = event.payload
            elif kind is EventKind.CREATE_ICN:
                self.show_create_icn = True
            elif kind is EventKind.OPEN_SETTINGS:
                self.show_settings = True
            elif kind is EventKind.START_PCSX2:
                launch_pcsx2(self.state.pcsx2_path)
            elif kind is EventKind.START_PCSX2_ELF:
                launch_pcsx2(self.state.pcsx2_path, event.payload)
            elif kind is EventKind.VALIDATE:
                validate(self._require_folder())
            else:
                unhandled.append(event)

        if self._watcher is not None and self._watcher.poll_events():
            if self.state.opened_folder is not None:
                self.refresh()
        return unhandled

    def save(self) -> WorkspaceSave | None:
        """Write the opened folder and PCSX2 path to the storage file."""
        if self.storage_path is None:
            return None
        saved = WorkspaceSave(self.state.opened_folder, self.state.pcsx2_path)
        data = {
            "opened_folder": (
                None if saved.opened_folder is None else os.fspath(saved.opened_folder)
            ),
            "pcsx2_path": saved.pcsx2_path,
        }
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        self.storage_path.write_text(json.dumps(data), encoding="utf-8")
        return saved

    def load(self) -> WorkspaceSave | None:
        """Restore from the storage file, reopening the folder if it still exists."""
        if self.storage_path is None or not self.storage_path.exists():
            return None
        data = json.loads(self.storage_path.read_text(encoding="utf-8"))
        folder = data.get("opened_folder")
        saved = WorkspaceSave(
            opened_folder=Path(folder) if folder else None,
            pcsx2_path=data.get("pcsx2_path") or "",
        )
        self.state.pcsx2_path = saved.pcsx2_path
        if saved.opened_folder is not None and saved.opened_folder.exists():
            self.open_folder(saved.opened_folder)
        return saved

    def _close(self) -> None:
        if self._watcher is not None:
            self._watcher.stop()
            self._watcher = None


def main(argv: list[str] | None = None) -> int:
    """List a save folder's files and archive size, optionally checking or running it."""
    parser = argparse.ArgumentParser(prog="ps2suitcase", description="PS2 save folder workspace")
    parser.add_argument("folder", nargs="?", help="save folder to open")
    parser.add_argument("--storage", help="file that remembers the workspace")
    parser.add_argument("--pcsx2", help="path of the PCSX2 executable or application")
    parser.add_argument("--validate", action="store_true", help="check the folder")
    parser.add_argument("--run", metavar="ELF", help="boot an ELF in PCSX2")
    args = parser.parse_args(argv)

    workspace = Workspace(args.storage)
    try:
        workspace.load()
        if args.pcsx2:
            workspace.state.pcsx2_path = args.pcsx2
        if args.folder:
            workspace.open_folder(args.folder)
        if workspace.state.opened_folder is None:
            print("No folder is opened.", file=sys.stderr)
            return 1
        if args.validate:
            workspace.state.validate()
        if args.run:
            workspace.state.start_pcsx2_elf(args.run)
        workspace.handle_events()

        print(workspace.title)
        for file in workspace.state.files:
            print(f"{file.size:>10}  {file.name}")
        print(f"Archive size: {workspace.state.files.calculated_size()}")
        workspace.save()
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    finally:
        workspace._close()
    return 0