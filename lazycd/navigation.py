"""Directory navigation state: current path, selection, history, viewport.

All transitions are synchronous. A transition that needs a new listing asks
the injected lister first and only mutates state once the listing succeeded,
so a ``ListingError`` always leaves the previous view intact.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .actions import Action
from .entries import Entry, Listing, index_of, list_directory

LOGGER = logging.getLogger(__name__)

FAST_MOVE_STEP = 5

Lister = Callable[[Path, bool], Listing]


@dataclass(frozen=True)
class HistoryFrame:
    """A previously visited directory and the selection held there."""

    path: Path
    selected_index: int | None


class NavigationState:
    def __init__(
        self,
        current_path: Path,
        listing: Listing,
        *,
        lister: Lister = list_directory,
        show_hidden: bool = False,
        viewport_rows: int = 10,
    ) -> None:
        self.current_path = current_path
        self.listing = listing
        self.lister = lister
        self.show_hidden = show_hidden
        self.history: list[HistoryFrame] = []
        self.remembered: dict[Path, str] = {}
        self.selected_index: int | None = 0 if listing else None
        self.viewport_offset = 0
        self.viewport_rows = max(1, viewport_rows)

    @classmethod
    def open(
        cls,
        path: Path,
        *,
        lister: Lister = list_directory,
        show_hidden: bool = False,
        viewport_rows: int = 10,
    ) -> NavigationState:
        """List ``path`` and build a state positioned on its first entry.

        Raises ``ListingError`` when the start directory cannot be listed.
        """
        current = Path(path).absolute()
        listing = lister(current, show_hidden)
        return cls(current, listing, lister=lister, show_hidden=show_hidden, viewport_rows=viewport_rows)

    @property
    def selected_entry(self) -> Entry | None:
        if self.selected_index is None:
            return None
        return self.listing[self.selected_index]

    def apply(self, action: Action) -> None:
        """Run one browsing transition. Listing failures propagate unchanged."""
        if action is Action.MOVE_UP:
            self.move(-1)
        elif action is Action.MOVE_DOWN:
            self.move(1)
        elif action is Action.MOVE_UP_FAST:
            self.move(-FAST_MOVE_STEP)
        elif action is Action.MOVE_DOWN_FAST:
            self.move(FAST_MOVE_STEP)
        elif action is Action.GO_TO_TOP:
            self.go_to_top()
        elif action is Action.GO_TO_BOTTOM:
            self.go_to_bottom()
        elif action is Action.ENTER:
            self.enter()
        elif action is Action.LEAVE:
            self.leave()
        elif action is Action.PARENT:
            self.parent()
        elif action is Action.TOGGLE_HIDDEN:
            self.toggle_hidden()
        elif action is Action.RELOAD:
            self.reload()

    # Selection and viewport

    def select(self, index: int) -> None:
        """Select ``index`` clamped into the listing; no-op when empty."""
        if not self.listing:
            self.selected_index = None
            return
        self.selected_index = max(0, min(len(self.listing) - 1, index))
        self._scroll_to_selection()

    def move(self, delta: int) -> None:
        if self.selected_index is None:
            return
        self.select(self.selected_index + delta)

    def go_to_top(self) -> None:
        self.select(0)

    def go_to_bottom(self) -> None:
        self.select(len(self.listing) - 1)

    def set_viewport_rows(self, rows: int) -> None:
        self.viewport_rows = max(1, rows)
        self._scroll_to_selection()

    def visible_range(self) -> range:
        end = min(len(self.listing), self.viewport_offset + self.viewport_rows)
        return range(self.viewport_offset, end)

    def _scroll_to_selection(self) -> None:
        if self.selected_index is None:
            self.viewport_offset = 0
            return
        if self.selected_index < self.viewport_offset:
            self.viewport_offset = self.selected_index
        elif self.selected_index >= self.viewport_offset + self.viewport_rows:
            self.viewport_offset = self.selected_index - self.viewport_rows + 1
        max_offset = max(0, len(self.listing) - self.viewport_rows)
        self.viewport_offset = max(0, min(self.viewport_offset, max_offset))

    # Directory changes

    def _replace_listing(self, path: Path, listing: Listing, selected_index: int | None) -> None:
        self.current_path = path
        self.listing = listing
        self.viewport_offset = 0
        if not listing:
            self.selected_index = None
        else:
            self.selected_index = max(0, min(len(listing) - 1, selected_index or 0))
        self._scroll_to_selection()

    def _remember_selection(self) -> None:
        entry = self.selected_entry
        if entry is not None:
            self.remembered[self.current_path] = entry.name

    def _remembered_index(self, path: Path, listing: Listing) -> int | None:
        name = self.remembered.get(path)
        if name is None:
            return None
        return index_of(listing, name)

    def enter(self) -> bool:
        """Descend into the selected directory. Returns whether it moved."""
        entry = self.selected_entry
        if entry is None or not entry.is_enterable:
            return False
        target = self.current_path / entry.name
        listing = self.lister(target, self.show_hidden)

        self._remember_selection()
        self.history.append(HistoryFrame(self.current_path, self.selected_index))
        self._replace_listing(target, listing, self._remembered_index(target, listing))
        LOGGER.debug("entered %s", target)
        return True

    def leave(self) -> bool:
        """Return to the most recent history frame. Returns whether it moved."""
        if not self.history:
            return False
        frame = self.history[-1]
        listing = self.lister(frame.path, self.show_hidden)

        self.history.pop()
        self._remember_selection()
        came_from = self.current_path
        selected = None
        if came_from.parent == frame.path:
            selected = index_of(listing, came_from.name)
        if selected is None:
            selected = self._remembered_index(frame.path, listing)
        if selected is None:
            selected = frame.selected_index
        self._replace_listing(frame.path, listing, selected)
        LOGGER.debug("left %s for %s", came_from, frame.path)
        return True

    def parent(self) -> bool:
        """Move to the parent directory, selecting the directory just left."""
        parent = self.current_path.parent
        if parent == self.current_path:
            return False
        listing = self.lister(parent, self.show_hidden)

        self._remember_selection()
        self.history.append(HistoryFrame(self.current_path, self.selected_index))
        self._replace_listing(parent, listing, index_of(listing, self.current_path.name))
        return True

    def reload(self) -> None:
        """Re-read the current directory, keeping the selection by name."""
        listing = self.lister(self.current_path, self.show_hidden)
        self._relist(listing)

    def toggle_hidden(self) -> None:
        listing = self.lister(self.current_path, not self.show_hidden)
        self.show_hidden = not self.show_hidden
        self._relist(listing)

    def _relist(self, listing: Listing) -> None:
        entry = self.selected_entry
        selected = index_of(listing, entry.name) if entry is not None else None
        if selected is None:
            selected = self.selected_index
        offset = self.viewport_offset
        self._replace_listing(self.current_path, listing, selected)
        if listing:
            self.viewport_offset = offset
            self._scroll_to_selection()


__all__ = [
    "FAST_MOVE_STEP",
    "HistoryFrame",
    "Lister",
    "NavigationState",
]
