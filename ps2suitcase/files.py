"""Files of an opened save folder and their size inside a PSU archive."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

_ENTRY_SIZE = 512
_CLUSTER = 1024


@dataclass
class VirtualFile:
    """A file on disk as shown in the workspace."""

    name: str
    file_path: Path
    size: int


def calc_size(size: int) -> int:
    """Round a file size up to a whole number of 1024-byte clusters."""
    return (size + _CLUSTER - 1) & -_CLUSTER


def calculate_size(files: Iterable[VirtualFile]) -> int:
    """Return the PSU archive size needed to hold the given files.

    The size is read from disk, so missing files raise ``OSError``.
    """
    total = sum(
        _ENTRY_SIZE + calc_size(Path(f.file_path).stat().st_size) for f in files
    )
    # Root directory, "." and ".." entries come first.
    return _ENTRY_SIZE * 3 + total


class Files:
    """An ordered collection of workspace files with their archive size."""

    def __init__(self, files: Iterable[VirtualFile] | None = None) -> None:
        if files is None:
            self._files: list[VirtualFile] = []
            self._size = 0
            return
        self._files = list(files)
        self._size = calculate_size(self._files)
        self._files.sort(key=lambda f: f.name)

    def add_file(self, file_path: str | os.PathLike[str]) -> None:
        """Append a file from disk and recompute the archive size."""
        path = Path(file_path)
        name = path.name
        if name in ("", ".", ".."):
            raise OSError(f"Invalid file name: {path}")
        size = path.stat().st_size
        self._files.append(VirtualFile(name=name, file_path=path, size=size))
        self._size = calculate_size(self._files)

    def calculated_size(self) -> int:
        """Return the archive size computed for the current files."""
        return self._size

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[VirtualFile]:
        return iter(self._files)

    def __getitem__(self, index: int) -> VirtualFile:
        return self._files[index]


def read_folder(folder: str | os.PathLike[str]) -> Files:
    """Collect the regular files directly inside ``folder``."""
    found: list[VirtualFile] = []
    with os.scandir(folder) as entries:
        for entry in entries:
            try:
                if not entry.is_file(follow_symlinks=False):
                    continue
            except OSError:
                continue
            path = Path(entry.path)
            found.append(
                VirtualFile(name=entry.name, file_path=path, size=path.stat().st_size)
            )
    return Files(found)