"""Interaction with the host system: file manager and folder checks."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


def reveal_command(
    path: str | os.PathLike[str], platform: str | None = None
) -> list[str] | None:
    """Return the command that shows ``path`` in the file manager.

    ``None`` is returned where the platform has no such command or the
    path has no parent to open.
    """
    platform = sys.platform if platform is None else platform
    path = Path(path)
    if platform == "win32":
        return ["explorer", "/select,", str(path)]
    if platform == "darwin":
        return ["open", "-R", str(path)]
    if platform.startswith("linux"):
        parent = path.parent
        if parent == path:
            return None
        return ["xdg-open", str(parent)]
    return None


def reveal_file_in_explorer(path: str | os.PathLike[str]) -> None:
    """Show ``path`` in the system file manager, ignoring failures."""
    command = reveal_command(path)
    if command is None:
        return
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def validate(folder: str | os.PathLike[str]) -> None:
    """Check a save folder, reporting progress on standard output."""
    print(f"Checking {os.fspath(folder)}.")