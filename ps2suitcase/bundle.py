"""Assembling the macOS application bundle from a build tree."""

from __future__ import annotations

import argparse
import os
import shutil
import sys
from pathlib import Path

BUNDLE_NAME = "PSU Builder.app"


def build_app_bundle(
    workspace_root: str | os.PathLike[str], platform: str | None = None
) -> Path:
    """Rebuild ``build/PSU Builder.app`` under ``workspace_root``.

    The previous bundle must exist; it is removed first. Returns the
    bundle's ``Contents`` directory.
    """
    platform = sys.platform if platform is None else platform
    if platform != "darwin":
        raise OSError("unsupported operating system")

    root = Path(workspace_root)
    bundle = root / "build" / BUNDLE_NAME
    contents = bundle / "Contents"
    mac_os = contents / "MacOS"
    resources = contents / "Resources"

    shutil.rmtree(bundle)
    mac_os.mkdir(parents=True, exist_ok=True)
    resources.mkdir(parents=True, exist_ok=True)

    assets = root / ".." / ".." / "suitcase" / "assets"
    shutil.copy(root / "target" / "debug" / "suitcase", mac_os / "PSU Builder")
    shutil.copy(assets / "ps2.icns", resources / "icon.icns")
    shutil.copy(assets / "Info.plist", contents / "Info.plist")
    return contents


def main(argv: list[str] | None = None) -> int:
    """Build the application bundle; returns a process exit status."""
    parser = argparse.ArgumentParser(prog="ps2suitcase-bundle")
    parser.add_argument("workspace_root", nargs="?", default=".")
    parser.add_argument("--platform", default=None, help=argparse.SUPPRESS)
    args = parser.parse_args(argv)
    try:
        contents = build_app_bundle(args.workspace_root, args.platform)
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(contents)
    return 0