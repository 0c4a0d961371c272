"""Abstract action vocabulary shared by the key mapper and state machines."""

from __future__ import annotations

import enum


class Action(enum.Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_UP_FAST = "move_up_fast"
    MOVE_DOWN_FAST = "move_down_fast"
    ENTER = "enter"
    LEAVE = "leave"
    PARENT = "parent"
    GO_TO_TOP = "go_to_top"
    GO_TO_BOTTOM = "go_to_bottom"
    TOGGLE_HIDDEN = "toggle_hidden"
    RELOAD = "reload"
    CONFIRM = "confirm"
    QUIT = "quit"
    START_FIND_FORWARD = "start_find_forward"
    START_FIND_BACKWARD = "start_find_backward"
    SEARCH_NEXT = "search_next"
    SEARCH_PREVIOUS = "search_previous"
    SEARCH_CHAR = "search_char"
    SEARCH_BACKSPACE = "search_backspace"
    SEARCH_CONFIRM = "search_confirm"
    SEARCH_CANCEL = "search_cancel"


class Mode(enum.Enum):
    BROWSING = "browsing"
    SEARCHING = "searching"


# Actions handled by NavigationState.apply.
NAVIGATION_ACTIONS = frozenset(
    {
        Action.MOVE_UP,
        Action.MOVE_DOWN,
        Action.MOVE_UP_FAST,
        Action.MOVE_DOWN_FAST,
        Action.ENTER,
        Action.LEAVE,
        Action.PARENT,
        Action.GO_TO_TOP,
        Action.GO_TO_BOTTOM,
        Action.TOGGLE_HIDDEN,
        Action.RELOAD,
    }
)

__all__ = ["Action", "Mode", "NAVIGATION_ACTIONS"]
