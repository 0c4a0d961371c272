"""Key bindings: the single mapping from key tokens to abstract actions.

``map_key`` is total. Unknown tokens map to ``None`` and are ignored by the
loop; nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass

from .actions import Action, Mode


@dataclass(frozen=True)
class KeyAction:
    """An action plus the typed character for ``SEARCH_CHAR``."""

    action: Action
    char: str = ""


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action."""

    combos: tuple[str, ...]
    action: Action


class KeyComboRegistry:
    """Small key-lookup table for one mode."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing actions for same combos."""
        for combo in binding.combos:
            self._actions[combo] = binding.action
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> Action | None:
        return self._actions.get(key)

    def combos_for(self, action: Action) -> tuple[str, ...]:
        return tuple(key for key, bound in self._actions.items() if bound is action)


BROWSING_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("k", "UP"), Action.MOVE_UP),
    KeyComboBinding(("j", "DOWN"), Action.MOVE_DOWN),
    KeyComboBinding(("K", "PAGE_UP"), Action.MOVE_UP_FAST),
    KeyComboBinding(("J", "PAGE_DOWN"), Action.MOVE_DOWN_FAST),
    KeyComboBinding(("l", "RIGHT"), Action.ENTER),
    KeyComboBinding(("h", "LEFT"), Action.LEAVE),
    KeyComboBinding(("-",), Action.PARENT),
    KeyComboBinding(("g", "HOME"), Action.GO_TO_TOP),
    KeyComboBinding(("G", "END"), Action.GO_TO_BOTTOM),
    KeyComboBinding(("f", "/"), Action.START_FIND_FORWARD),
    KeyComboBinding(("F", "?"), Action.START_FIND_BACKWARD),
    KeyComboBinding(("n",), Action.SEARCH_NEXT),
    KeyComboBinding(("N",), Action.SEARCH_PREVIOUS),
    KeyComboBinding((".",), Action.TOGGLE_HIDDEN),
    KeyComboBinding(("r",), Action.RELOAD),
    KeyComboBinding(("ENTER",), Action.CONFIRM),
    KeyComboBinding(("q", "ESC", "CTRL_C", "CTRL_D"), Action.QUIT),
)

SEARCHING_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("BACKSPACE",), Action.SEARCH_BACKSPACE),
    KeyComboBinding(("ENTER",), Action.SEARCH_CONFIRM),
    KeyComboBinding(("ESC",), Action.SEARCH_CANCEL),
    KeyComboBinding(("CTRL_C",), Action.QUIT),
)


def _is_search_char(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def map_key(key: str, mode: Mode) -> KeyAction | None:
    """Translate one key token in ``mode`` into at most one action."""
    if mode is Mode.SEARCHING:
        action = SEARCHING_KEYS.lookup(key)
        if action is not None:
            return KeyAction(action)
        if _is_search_char(key):
            return KeyAction(Action.SEARCH_CHAR, key)
        return None
    action = BROWSING_KEYS.lookup(key)
    if action is None:
        return None
    return KeyAction(action)


__all__ = [
    "BROWSING_KEYS",
    "SEARCHING_KEYS",
    "KeyAction",
    "KeyComboBinding",
    "KeyComboRegistry",
    "map_key",
]
