"""Scene: routes reactions to the views and keeps them in sync with the tab list.

The tab list lives in ``pipeline.config.tabs`` and is the only writable copy.
The tab bar and content views hold a reference to it and are told explicitly
when the selection changes or the list is mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..dispatcher import Mode, Reaction, SceneReaction, UserInput
from ..errors import IndexOutOfRange, LaunchFailure, PersistenceFailure, ValidationError
from ..launcher import describe_exit
from ..manifest import ItemConfig
from ..ops import NO_OP, AppendTab, ConfigOp, NoOp, RemoveTab, describe
from ..pipeline import ConfigPipeline
from ..render import DEFAULT_THEME, Frame, UITheme, scene_layout
from .content import ContentView
from .instruction import InstructionPanel
from .navtab import TabBarView

logger = logging.getLogger(__name__)

MODE_FOR_REACTION = {
    Reaction.APPEND_TAB: Mode.APPENDING_TAB,
    Reaction.REMOVE_TAB: Mode.REMOVING_TAB,
    Reaction.APPEND_GAME: Mode.APPENDING_GAME,
    Reaction.REMOVE_GAME: Mode.REMOVING_GAME,
}


class Scene:
    """Own the three views and apply one reaction at a time."""

    def __init__(
        self,
        pipeline: ConfigPipeline,
        launch: Callable[[ItemConfig], int],
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        self.pipeline = pipeline
        self.tabs = pipeline.tabs
        self.navtab = TabBarView(self.tabs)
        self.content = ContentView(self.tabs)
        self.ops = InstructionPanel()
        self.theme = theme
        self.quit_requested = False
        self._launch = launch

    def react(self, reaction: SceneReaction) -> ConfigOp:
        """Apply ``reaction``; returns the op committed by a confirm, else ``NO_OP``."""
        if isinstance(reaction, UserInput):
            self.ops.input_word(reaction.key)
        elif reaction is Reaction.LAUNCH_GAME:
            self.launch_current()
        elif reaction is Reaction.NEXT_TAB:
            self.navtab.next()
            self.content.set_tab(self.navtab.index)
        elif reaction is Reaction.PREVIOUS_TAB:
            self.navtab.previous()
            self.content.set_tab(self.navtab.index)
        elif reaction is Reaction.NEXT_GAME:
            self.content.next_game()
        elif reaction is Reaction.PREVIOUS_GAME:
            self.content.previous_game()
        elif reaction in MODE_FOR_REACTION:
            self.ops.switch_mode(MODE_FOR_REACTION[reaction])
        elif reaction is Reaction.SWITCH_INPUT_FOCUS:
            self.ops.switch_input_focus()
        elif reaction is Reaction.CANCEL_OP:
            self.ops.cancel_op()
        elif reaction is Reaction.CONFIRM_ACTION:
            return self.confirm()
        return NO_OP

    def launch_current(self) -> None:
        item = self.content.current_item()
        if item is None:
            self.ops.set_hint("No game selected")
            return

        self.ops.switch_mode(Mode.RUNNING, item.name)
        try:
            hint = describe_exit(self._launch(item))
        except LaunchFailure as exc:
            hint = str(exc)
        finally:
            self.ops.switch_mode(Mode.COMMON)

        if hint is not None:
            logger.warning("%s: %s", item.name, hint)
            self.ops.set_hint(f"{item.name}: {hint}")
        elif self.pipeline.config.setting.is_close_after_game_launch:
            self.quit_requested = True

    def confirm(self) -> ConfigOp:
        try:
            op = self.ops.confirm_op(self.navtab.index)
        except ValidationError as exc:
            logger.debug("rejected form: %s", exc)
            self.ops.set_hint(str(exc))
            return NO_OP
        if isinstance(op, NoOp):
            return op

        try:
            self.pipeline.apply(op)
        except IndexOutOfRange as exc:
            logger.info("rejected %s: %s", describe(op), exc)
            self.ops.set_hint(str(exc))
            return NO_OP
        except PersistenceFailure as exc:
            logger.error("%s", exc)
            self._sync_views(op)
            self.ops.set_hint(f"{exc} (change kept for this session only)")
            return op

        self._sync_views(op)
        self.ops.set_hint(f"Saved: {describe(op)}")
        return op

    def _sync_views(self, op: ConfigOp) -> None:
        self.navtab.on_list_mutated(op)
        if isinstance(op, (AppendTab, RemoveTab)):
            self.content.set_tab(self.navtab.index)
        else:
            self.content.on_list_mutated(op)

    def draw(self, frame: Frame) -> None:
        tab_bar, content, instruction = scene_layout(frame.width, frame.height)
        self.navtab.draw(frame, tab_bar, self.theme)
        self.content.draw(frame, content, self.theme)
        self.ops.draw(frame, instruction, self.theme)
