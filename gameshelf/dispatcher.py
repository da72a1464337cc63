"""Mode state machine turning raw events into scene intents.

The dispatcher owns the current interaction ``Mode`` and decides, per mode,
which keys are legal. Navigation keys never reach a text field and letters
typed into a form never reach navigation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

from .events import Event, InputEvent
from .input import (
    APPEND_GAME_KEY,
    APPEND_TAB_KEY,
    CANCEL_KEY,
    CONFIRM_KEY,
    EXIT_KEY,
    REMOVE_GAME_KEY,
    REMOVE_TAB_KEY,
    is_text_key,
)


class Mode(enum.Enum):
    COMMON = "common"
    APPENDING_GAME = "appending_game"
    REMOVING_GAME = "removing_game"
    APPENDING_TAB = "appending_tab"
    REMOVING_TAB = "removing_tab"
    RUNNING = "running"


class Reaction(enum.Enum):
    NEXT_TAB = "next_tab"
    PREVIOUS_TAB = "previous_tab"
    NEXT_GAME = "next_game"
    PREVIOUS_GAME = "previous_game"
    LAUNCH_GAME = "launch_game"
    APPEND_TAB = "append_tab"
    REMOVE_TAB = "remove_tab"
    APPEND_GAME = "append_game"
    REMOVE_GAME = "remove_game"
    SWITCH_INPUT_FOCUS = "switch_input_focus"
    CANCEL_OP = "cancel_op"
    CONFIRM_ACTION = "confirm_action"


@dataclass(frozen=True)
class UserInput:
    """Edit key forwarded to the active form buffer."""

    key: str


SceneReaction = Reaction | UserInput


@dataclass(frozen=True)
class Terminate:
    pass


@dataclass(frozen=True)
class Redraw:
    pass


@dataclass(frozen=True)
class React:
    reaction: SceneReaction


SceneAction = Terminate | Redraw | React

TERMINATE = Terminate()
REDRAW = Redraw()

COMMON_NAVIGATION: dict[str, Reaction] = {
    "RIGHT": Reaction.NEXT_TAB,
    "LEFT": Reaction.PREVIOUS_TAB,
    "DOWN": Reaction.NEXT_GAME,
    "UP": Reaction.PREVIOUS_GAME,
    CONFIRM_KEY: Reaction.LAUNCH_GAME,
}

MODE_ENTRY_KEYS: dict[str, tuple[Mode, Reaction]] = {
    APPEND_GAME_KEY: (Mode.APPENDING_GAME, Reaction.APPEND_GAME),
    REMOVE_GAME_KEY: (Mode.REMOVING_GAME, Reaction.REMOVE_GAME),
    APPEND_TAB_KEY: (Mode.APPENDING_TAB, Reaction.APPEND_TAB),
    REMOVE_TAB_KEY: (Mode.REMOVING_TAB, Reaction.REMOVE_TAB),
}

EDIT_KEYS = frozenset({"BACKSPACE", "DELETE"})
FOCUS_KEYS = frozenset({"UP", "DOWN"})
SINGLE_FIELD_MODES = frozenset({Mode.APPENDING_TAB, Mode.REMOVING_GAME, Mode.REMOVING_TAB})


class EventChannel(Protocol):
    def next(self) -> Event: ...


class ModeDispatcher:
    """Map ``(mode, event)`` to a ``SceneAction``."""

    def __init__(self, events: EventChannel) -> None:
        self.events = events
        self.mode = Mode.COMMON

    def tick(self) -> SceneAction:
        """Block for one event and translate it under the current mode."""
        event = self.events.next()
        if not isinstance(event, InputEvent):
            return REDRAW
        return self.dispatch_key(event.key)

    def dispatch_key(self, key: str) -> SceneAction:
        if self.mode is Mode.COMMON:
            return self._dispatch_common(key)
        if self.mode is Mode.APPENDING_GAME:
            return self._dispatch_form(key, two_fields=True)
        if self.mode in SINGLE_FIELD_MODES:
            return self._dispatch_form(key, two_fields=False)
        # Launches complete before the next event is read.
        raise RuntimeError(f"no key routing in mode {self.mode.name}")

    def _dispatch_common(self, key: str) -> SceneAction:
        if key == EXIT_KEY:
            return TERMINATE
        reaction = COMMON_NAVIGATION.get(key)
        if reaction is not None:
            return React(reaction)
        entry = MODE_ENTRY_KEYS.get(key)
        if entry is not None:
            self.mode, reaction = entry
            return React(reaction)
        return REDRAW

    def _dispatch_form(self, key: str, *, two_fields: bool) -> SceneAction:
        if key == CANCEL_KEY:
            self.mode = Mode.COMMON
            return React(Reaction.CANCEL_OP)
        if key == CONFIRM_KEY:
            self.mode = Mode.COMMON
            return React(Reaction.CONFIRM_ACTION)
        if key in EDIT_KEYS or is_text_key(key):
            return React(UserInput(key))
        if two_fields and key in FOCUS_KEYS:
            return React(Reaction.SWITCH_INPUT_FOCUS)
        return REDRAW
