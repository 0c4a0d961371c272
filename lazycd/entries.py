"""Directory listing for the navigation pane.

Scans exactly one directory with ``os.scandir`` and returns typed, sorted
entries. Scan failures raise ``ListingError``; the caller decides how to
report them.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ListingError

LOGGER = logging.getLogger(__name__)


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """One child of a listed directory."""

    name: str
    kind: EntryKind
    points_to_dir: bool = False

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def is_enterable(self) -> bool:
        """Directories and symlinks resolving to directories can be entered."""
        if self.kind is EntryKind.DIRECTORY:
            return True
        return self.kind is EntryKind.SYMLINK and self.points_to_dir


Listing = tuple[Entry, ...]


def entry_sort_key(entry: Entry) -> tuple[int, str]:
    """Directories first, then code-point order by name."""
    return (0 if entry.kind is EntryKind.DIRECTORY else 1, entry.name)


def _classify(child: os.DirEntry[str]) -> Entry:
    """Build an ``Entry`` without following symlinks for its kind."""
    name = child.name
    try:
        if child.is_symlink():
            try:
                points_to_dir = child.is_dir(follow_symlinks=True)
            except OSError:
                points_to_dir = False
            return Entry(name=name, kind=EntryKind.SYMLINK, points_to_dir=points_to_dir)
        if child.is_dir(follow_symlinks=False):
            return Entry(name=name, kind=EntryKind.DIRECTORY)
        if child.is_file(follow_symlinks=False):
            return Entry(name=name, kind=EntryKind.FILE)
    except OSError:
        LOGGER.debug("stat failed for %s", child.path, exc_info=True)
    return Entry(name=name, kind=EntryKind.OTHER)


def list_directory(directory: Path, show_hidden: bool = True) -> Listing:
    """Return the sorted children of ``directory``.

    Raises ``ListingError`` when the directory is missing, unreadable, or not
    a directory. Individual children that cannot be inspected are reported as
    ``EntryKind.OTHER`` rather than failing the whole listing.
    """
    directory = Path(os.path.abspath(directory))
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as it:
            for child in it:
                if not show_hidden and child.name.startswith("."):
                    continue
                entries.append(_classify(child))
    except OSError as exc:
        error = ListingError.from_os_error(directory, exc)
        LOGGER.info("listing failed: %s", error.message)
        raise error from exc

    entries.sort(key=entry_sort_key)
    LOGGER.debug("listed %s: %d entries", directory, len(entries))
    return tuple(entries)


def index_of(listing: Listing, name: str) -> int | None:
    """Return the position of the entry called ``name``, if present."""
    for idx, entry in enumerate(listing):
        if entry.name == name:
            return idx
    return None


__all__ = [
    "EntryKind",
    "Entry",
    "Listing",
    "entry_sort_key",
    "list_directory",
    "index_of",
]
