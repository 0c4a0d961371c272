"""Interactive loop owner for the directory picker.

``PickerApp`` holds the explicit mode, the live navigation and search state,
and the transient status line. Key handling is separated from the terminal
loop so every transition can be driven without a tty.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .actions import NAVIGATION_ACTIONS, Action, Mode
from .emitter import DEFAULT_OUTPUT_PATH, emit_path
from .errors import ListingError
from .input import read_key
from .keys import KeyAction, map_key
from .navigation import NavigationState
from .render import DisplayConfig, Renderer, StatusMessage, listing_rows_for_height
from .search import SearchDirection, SearchEngine
from .terminal import TerminalController

LOGGER = logging.getLogger(__name__)


class Outcome(enum.Enum):
    CONFIRMED = "confirmed"
    QUIT = "quit"


@dataclass(frozen=True)
class RunResult:
    outcome: Outcome
    path: Path | None = None


class PickerApp:
    def __init__(
        self,
        navigation: NavigationState,
        *,
        display: DisplayConfig | None = None,
        search_wrap: bool = True,
        output_path: Path = DEFAULT_OUTPUT_PATH,
    ) -> None:
        self.navigation = navigation
        self.search = SearchEngine(navigation, wrap=search_wrap)
        self.display = display if display is not None else DisplayConfig()
        self.output_path = output_path
        self.mode = Mode.BROWSING
        self.status: StatusMessage | None = None

    def handle_key(self, key: str) -> Outcome | None:
        """Map and apply one key token. Returns an outcome when the loop ends."""
        key_action = map_key(key, self.mode)
        if key_action is None:
            return None
        return self.handle_action(key_action)

    def handle_action(self, key_action: KeyAction) -> Outcome | None:
        action = key_action.action
        LOGGER.debug("mode=%s action=%s", self.mode.value, action.value)
        self.status = None
        if action is Action.QUIT:
            return Outcome.QUIT
        if self.mode is Mode.SEARCHING:
            self._handle_search_action(key_action)
            return None
        if action is Action.CONFIRM:
            return Outcome.CONFIRMED
        if action in NAVIGATION_ACTIONS:
            self._apply_navigation(action)
        elif action is Action.START_FIND_FORWARD:
            self._start_search(SearchDirection.FORWARD)
        elif action is Action.START_FIND_BACKWARD:
            self._start_search(SearchDirection.BACKWARD)
        elif action in (Action.SEARCH_NEXT, Action.SEARCH_PREVIOUS):
            self._repeat_search(reverse=action is Action.SEARCH_PREVIOUS)
        return None

    def _apply_navigation(self, action: Action) -> None:
        try:
            self.navigation.apply(action)
        except ListingError as exc:
            self.status = StatusMessage(exc.message, is_error=True)
            return
        if action is Action.TOGGLE_HIDDEN:
            label = "shown" if self.navigation.show_hidden else "hidden"
            self.status = StatusMessage(f"hidden files {label}")

    def _start_search(self, direction: SearchDirection) -> None:
        self.search.start(direction)
        self.mode = Mode.SEARCHING

    def _repeat_search(self, reverse: bool) -> None:
        found = self.search.repeat(reverse=reverse)
        if found is None:
            self.status = StatusMessage("no previous search")
        elif not found:
            self.status = StatusMessage(f"no match: {self.search.last_query}", is_error=True)

    def _handle_search_action(self, key_action: KeyAction) -> None:
        action = key_action.action
        if action is Action.SEARCH_CHAR:
            found = self.search.append(key_action.char)
        elif action is Action.SEARCH_BACKSPACE:
            found = self.search.backspace()
        elif action is Action.SEARCH_CONFIRM:
            self.search.confirm()
            self.mode = Mode.BROWSING
            return
        elif action is Action.SEARCH_CANCEL:
            self.search.cancel()
            self.mode = Mode.BROWSING
            return
        else:
            return
        if not found:
            self.status = StatusMessage("no match", is_error=True)

    def finish(self, outcome: Outcome) -> RunResult:
        """Apply the terminal action: Confirm emits the current directory."""
        if outcome is Outcome.CONFIRMED:
            path = self.navigation.current_path
            emit_path(path, self.output_path)
            return RunResult(outcome, path)
        return RunResult(outcome)

    def run(
        self,
        terminal: TerminalController,
        key_reader: Callable[[int], str] | None = None,
    ) -> RunResult:
        """Run until Quit or Confirm, restoring the terminal on every exit.

        ``OutputWriteError`` from the emitter propagates after restoration.
        """
        reader = key_reader if key_reader is not None else read_key
        renderer = Renderer(terminal.stdout_fd, self.display)
        with terminal.raw_mode():
            while True:
                columns, lines = terminal.size()
                self.navigation.set_viewport_rows(listing_rows_for_height(lines))
                renderer.draw(self.navigation, self.mode, self.search.state, self.status, columns, lines)
                key = reader(terminal.stdin_fd)
                if not key:
                    return self.finish(Outcome.QUIT)
                outcome = self.handle_key(key)
                if outcome is not None:
                    return self.finish(outcome)


__all__ = ["Outcome", "PickerApp", "RunResult"]
