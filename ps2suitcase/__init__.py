"""Workspace tools for PlayStation 2 save folders: files, events, watching, icon helpers and PCSX2 launching."""

__version__ = "0.1.0"