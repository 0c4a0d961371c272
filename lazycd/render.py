"""Rendering for the directory picker.

``build_rows`` and ``render_frame`` are pure projections of navigation and
search state. ``Renderer`` only writes the composed frame to the terminal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .actions import Action, Mode
from .ansi import clip_ansi_line, sanitize_name
from .entries import EntryKind
from .icons import icon_for
from .keys import BROWSING_KEYS, SEARCHING_KEYS, KeyComboRegistry
from .navigation import NavigationState
from .search import SearchDirection, SearchState, match_span
from .ui_theme import DEFAULT_THEME, UITheme

# Rows reserved for the header and the status line.
CHROME_ROWS = 2

_KEY_LABELS = {"ENTER": "Enter", "ESC": "Esc"}


def _hint_from_bindings(registry: KeyComboRegistry, items: tuple[tuple[tuple[Action, ...], str], ...]) -> str:
    """Build a hint line from the first key bound to each action."""
    parts = []
    for actions, label in items:
        keys = [registry.combos_for(action)[0] for action in actions]
        parts.append("/".join(_KEY_LABELS.get(key, key) for key in keys) + " " + label)
    return "  ".join(parts)


BROWSING_HINT = _hint_from_bindings(
    BROWSING_KEYS,
    (
        ((Action.LEAVE, Action.MOVE_DOWN, Action.MOVE_UP, Action.ENTER), "move"),
        ((Action.START_FIND_FORWARD, Action.START_FIND_BACKWARD), "find"),
        ((Action.SEARCH_NEXT, Action.SEARCH_PREVIOUS), "next"),
        ((Action.PARENT,), "parent"),
        ((Action.TOGGLE_HIDDEN,), "hidden"),
        ((Action.CONFIRM,), "select"),
        ((Action.QUIT,), "quit"),
    ),
)
SEARCHING_HINT = _hint_from_bindings(
    SEARCHING_KEYS,
    (((Action.SEARCH_CONFIRM,), "keep"), ((Action.SEARCH_CANCEL,), "cancel")),
)


@dataclass(frozen=True)
class DisplayConfig:
    """Read-only display settings fixed at startup."""

    show_icons: bool = False
    theme: UITheme = DEFAULT_THEME


@dataclass(frozen=True)
class DisplayRow:
    glyph: str
    name: str
    kind: EntryKind
    selected: bool
    match_span: tuple[int, int] | None = None


@dataclass(frozen=True)
class StatusMessage:
    text: str
    is_error: bool = False


def listing_rows_for_height(height: int) -> int:
    """Return how many listing rows fit in a terminal ``height`` lines tall."""
    return max(1, height - CHROME_ROWS)


def build_rows(
    navigation: NavigationState,
    search: SearchState | None,
    config: DisplayConfig,
) -> list[DisplayRow]:
    """Project the visible window of the listing into display rows."""
    query = search.query if search is not None else ""
    rows: list[DisplayRow] = []
    for idx in navigation.visible_range():
        entry = navigation.listing[idx]
        name = sanitize_name(entry.name)
        if entry.kind is EntryKind.DIRECTORY:
            name += "/"
        rows.append(
            DisplayRow(
                glyph=icon_for(entry) if config.show_icons else "",
                name=name,
                kind=entry.kind,
                selected=idx == navigation.selected_index,
                match_span=match_span(entry.name, query),
            )
        )
    return rows


def format_row(row: DisplayRow, theme: UITheme) -> str:
    """Render one display row as ANSI-styled text."""
    color = theme.color_for(row.kind)
    reset = theme.reset
    name = row.name
    if row.match_span is not None and theme.match:
        start, end = row.match_span
        name = f"{name[:start]}{theme.match}{name[start:end]}\033[24m{name[end:]}"
    glyph = f"{theme.icon}{row.glyph}{reset} " if row.glyph else ""
    text = f" {glyph}{color}{name}{reset}"
    if row.selected:
        # Keep reverse video active across internal resets.
        return theme.reverse + text.replace(reset, reset + theme.reverse) + reset
    return text


def format_header(navigation: NavigationState, theme: UITheme) -> str:
    path_text = sanitize_name(str(navigation.current_path))
    entry = navigation.selected_entry
    if entry is None:
        return f"{theme.header_path}{path_text}{theme.reset}"
    sep = "" if path_text.endswith("/") else "/"
    name = sanitize_name(entry.name)
    return f"{theme.header_path}{path_text}{sep}{theme.reset}{theme.header_selection}{name}{theme.reset}"


def format_status(
    mode: Mode,
    search: SearchState | None,
    status: StatusMessage | None,
    theme: UITheme,
) -> str:
    if mode is Mode.SEARCHING and search is not None:
        prompt = "/" if search.direction is SearchDirection.FORWARD else "?"
        line = f"{theme.search_prompt}{prompt}{theme.reset}{sanitize_name(search.query)}"
        if status is not None:
            color = theme.status_error if status.is_error else theme.status
            line += f"  {color}{status.text}{theme.reset}"
        else:
            line += f"  {theme.hint}{SEARCHING_HINT}{theme.reset}"
        return line
    if status is not None:
        color = theme.status_error if status.is_error else theme.status
        return f"{color}{status.text}{theme.reset}"
    return f"{theme.hint}{BROWSING_HINT}{theme.reset}"


def render_frame(
    navigation: NavigationState,
    mode: Mode,
    search: SearchState | None,
    status: StatusMessage | None,
    config: DisplayConfig,
    width: int,
    height: int,
) -> str:
    """Compose a full-screen frame string for the current state."""
    theme = config.theme
    usable_width = max(1, width - 1)
    lines: list[str] = [format_header(navigation, theme)]
    rows = build_rows(navigation, search, config)
    if not rows:
        lines.append(f"{theme.hint} (empty){theme.reset}")
    lines.extend(format_row(row, theme) for row in rows)
    body_rows = listing_rows_for_height(height)
    while len(lines) < body_rows + 1:
        lines.append("")
    lines = lines[: body_rows + 1]
    lines.append(format_status(mode, search, status, theme))

    out = ["\033[H\033[J"]
    for idx, line in enumerate(lines):
        if idx:
            out.append("\r\n")
        clipped = clip_ansi_line(line, usable_width)
        out.append(clipped)
        if "\033" in clipped:
            out.append(theme.reset)
    return "".join(out)


class Renderer:
    """Writes frames to the terminal output descriptor."""

    def __init__(self, stdout_fd: int, config: DisplayConfig) -> None:
        self.stdout_fd = stdout_fd
        self.config = config

    def draw(
        self,
        navigation: NavigationState,
        mode: Mode,
        search: SearchState | None,
        status: StatusMessage | None,
        width: int,
        height: int,
    ) -> None:
        frame = render_frame(navigation, mode, search, status, self.config, width, height)
        os.write(self.stdout_fd, frame.encode("utf-8", errors="replace"))


__all__ = [
    "BROWSING_HINT",
    "CHROME_ROWS",
    "DisplayConfig",
    "DisplayRow",
    "Renderer",
    "StatusMessage",
    "build_rows",
    "format_header",
    "format_row",
    "format_status",
    "listing_rows_for_height",
    "render_frame",
    "SEARCHING_HINT",
]
