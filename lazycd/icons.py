"""Nerd Font glyphs shown in front of entry names when icons are enabled."""

from __future__ import annotations

from .entries import Entry, EntryKind

KIND_ICONS: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "",
    EntryKind.FILE: "\U000f0214",
    EntryKind.SYMLINK: "",
    EntryKind.OTHER: "",
}

SYMLINK_DIR_ICON = ""


def icon_for(entry: Entry) -> str:
    if entry.kind is EntryKind.SYMLINK and entry.points_to_dir:
        return SYMLINK_DIR_ICON
    return KIND_ICONS[entry.kind]
