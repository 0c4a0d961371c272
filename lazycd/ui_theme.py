"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing, header, and status line.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entries import EntryKind


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    header_path: str
    header_selection: str
    entry_dir: str
    entry_file: str
    entry_symlink: str
    entry_other: str
    icon: str
    match: str
    status: str
    status_error: str
    search_prompt: str
    hint: str

    def color_for(self, kind: EntryKind) -> str:
        if kind is EntryKind.DIRECTORY:
            return self.entry_dir
        if kind is EntryKind.FILE:
            return self.entry_file
        if kind is EntryKind.SYMLINK:
            return self.entry_symlink
        return self.entry_other


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    header_path="\033[1;38;5;81m",
    header_selection="\033[38;5;229m",
    entry_dir="\033[1;31m",
    entry_file="\033[38;5;252m",
    entry_symlink="\033[38;5;44m",
    entry_other="\033[2;38;5;250m",
    icon="\033[38;5;109m",
    match="\033[4m",
    status="\033[2;38;5;250m",
    status_error="\033[1;38;5;203m",
    search_prompt="\033[1;38;5;81m",
    hint="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    header_path="\033[1;38;5;45m",
    header_selection="\033[38;5;153m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_symlink="\033[38;5;117m",
    entry_other="\033[2;38;5;110m",
    icon="\033[38;5;73m",
    match="\033[4m",
    status="\033[2;38;5;110m",
    status_error="\033[1;38;5;215m",
    search_prompt="\033[1;38;5;45m",
    hint="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="\033[7m",
    reset="\033[0m",
    header_path="",
    header_selection="",
    entry_dir="",
    entry_file="",
    entry_symlink="",
    entry_other="",
    icon="",
    match="",
    status="",
    status_error="",
    search_prompt="",
    hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
