"""Read-only JSON config helpers.

Supplies startup defaults for icons, hidden files, theme, output location,
and search wrapping. All access is defensive: malformed or missing config
falls back to built-in defaults. Nothing is written back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .emitter import DEFAULT_OUTPUT_PATH

LOGGER = logging.getLogger(__name__)

APP_NAME = "lazycd"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        LOGGER.warning("ignoring unreadable config %s", CONFIG_PATH, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def load_show_icons() -> bool:
    return _load_bool("show_icons", False)


def load_show_hidden() -> bool:
    return _load_bool("show_hidden", False)


def load_search_wrap() -> bool:
    """Return whether find scans wrap past the ends of the listing."""
    return _load_bool("search_wrap", True)


def load_theme_name() -> str | None:
    """Load theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_output_path() -> Path:
    """Return the file the confirmed directory is written to."""
    value = load_config().get("output_path")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_OUTPUT_PATH
    return Path(value.strip()).expanduser()


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_output_path",
    "load_search_wrap",
    "load_show_hidden",
    "load_show_icons",
    "load_theme_name",
]
