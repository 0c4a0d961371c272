"""Incremental find-in-listing for the navigation pane.

Matching is a case-insensitive substring test on entry names. Scans start
next to an anchor index and walk in the search direction, wrapping around the
listing unless wrapping is disabled.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .entries import Listing
from .navigation import NavigationState


class SearchDirection(enum.Enum):
    FORWARD = 1
    BACKWARD = -1

    def reversed(self) -> SearchDirection:
        if self is SearchDirection.FORWARD:
            return SearchDirection.BACKWARD
        return SearchDirection.FORWARD


def name_matches(name: str, query: str) -> bool:
    return query.casefold() in name.casefold()


def match_span(name: str, query: str) -> tuple[int, int] | None:
    """Return the ``[start, end)`` span of the first match of ``query``.

    The span indexes ``name`` itself. Case folding can expand one character
    into several (``ß`` to ``ss``), so each folded code point records the
    index of the character it came from.
    """
    if not query:
        return None
    folded_query = query.casefold()
    folded: list[str] = []
    origins: list[int] = []
    for idx, ch in enumerate(name):
        piece = ch.casefold()
        folded.append(piece)
        origins.extend([idx] * len(piece))
    start = "".join(folded).find(folded_query)
    if start < 0:
        return None
    end = start + len(folded_query)
    return origins[start], origins[end - 1] + 1


def find_match(
    listing: Listing,
    query: str,
    anchor: int | None,
    direction: SearchDirection,
    *,
    wrap: bool = True,
) -> int | None:
    """Return the index of the next entry whose name contains ``query``.

    The scan starts at the entry adjacent to ``anchor`` in ``direction``. With
    ``wrap`` the anchor entry itself is examined last; without it the scan
    stops at the listing boundary. An empty query never matches.
    """
    if not query or not listing:
        return None
    count = len(listing)
    step = direction.value
    if anchor is None:
        anchor = -1 if direction is SearchDirection.FORWARD else count
    for offset in range(1, count + 1):
        idx = anchor + step * offset
        if not wrap and not 0 <= idx < count:
            return None
        idx %= count
        if name_matches(listing[idx].name, query):
            return idx
    return None


@dataclass
class SearchState:
    direction: SearchDirection
    origin_index: int | None
    query: str = ""
    last_match_index: int | None = None


class SearchEngine:
    """Owns the single live ``SearchState`` and applies it to navigation."""

    def __init__(self, navigation: NavigationState, *, wrap: bool = True) -> None:
        self.navigation = navigation
        self.wrap = wrap
        self.state: SearchState | None = None
        self.last_query = ""
        self.last_direction = SearchDirection.FORWARD

    @property
    def active(self) -> bool:
        return self.state is not None

    def start(self, direction: SearchDirection) -> SearchState:
        """Enter find mode, discarding any previous search."""
        self.state = SearchState(direction=direction, origin_index=self.navigation.selected_index)
        return self.state

    def append(self, char: str) -> bool:
        """Extend the query by ``char`` and re-scan. Returns whether it hit."""
        state = self._require_state()
        state.query += char
        return self._rescan(state)

    def backspace(self) -> bool:
        state = self._require_state()
        state.query = state.query[:-1]
        if not state.query:
            state.last_match_index = None
            self._restore_origin(state)
            return True
        return self._rescan(state)

    def confirm(self) -> None:
        """Leave find mode keeping the current selection."""
        state = self._require_state()
        if state.query:
            self.last_query = state.query
            self.last_direction = state.direction
        self.state = None

    def cancel(self) -> None:
        """Leave find mode restoring the selection held before it began."""
        state = self._require_state()
        self._restore_origin(state)
        self.state = None

    def repeat(self, reverse: bool = False) -> bool | None:
        """Jump to the next hit of the last confirmed query.

        Returns ``None`` when there is no previous query, otherwise whether a
        match was found.
        """
        if not self.last_query:
            return None
        direction = self.last_direction.reversed() if reverse else self.last_direction
        idx = find_match(
            self.navigation.listing,
            self.last_query,
            self.navigation.selected_index,
            direction,
            wrap=self.wrap,
        )
        if idx is None:
            return False
        self.navigation.select(idx)
        return True

    def _rescan(self, state: SearchState) -> bool:
        idx = find_match(
            self.navigation.listing,
            state.query,
            state.origin_index,
            state.direction,
            wrap=self.wrap,
        )
        if idx is None:
            return False
        state.last_match_index = idx
        self.navigation.select(idx)
        return True

    def _restore_origin(self, state: SearchState) -> None:
        if state.origin_index is not None:
            self.navigation.select(state.origin_index)

    def _require_state(self) -> SearchState:
        if self.state is None:
            raise RuntimeError("find mode is not active")
        return self.state


__all__ = [
    "SearchDirection",
    "SearchState",
    "SearchEngine",
    "find_match",
    "match_span",
    "name_matches",
]
