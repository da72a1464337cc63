"""Runtime composition: wires config, scene, dispatcher, and terminal together.

The loop draws a frame, blocks for one event, and routes the resulting
action. Only an explicit quit (or close-after-launch) ends it.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from functools import partial
from pathlib import Path

from .dispatcher import ModeDispatcher, React, Terminate
from .events import EventSource
from .launcher import launch_program
from .manifest import EngineConfig, ItemConfig, write_manifest
from .ops import NoOp, describe
from .pipeline import ConfigPipeline
from .render import DEFAULT_THEME, Frame, UITheme
from .scene import Scene
from .terminal import TerminalController

logger = logging.getLogger(__name__)


class App:
    """One interactive session over a loaded manifest."""

    def __init__(
        self,
        config: EngineConfig,
        manifest_path: Path,
        terminal: TerminalController,
        events: EventSource,
        theme: UITheme = DEFAULT_THEME,
        launch_fn: Callable[[str], int] = launch_program,
    ) -> None:
        self.terminal = terminal
        self.events = events
        self.manifest_path = manifest_path
        self._launch_fn = launch_fn
        self.pipeline = ConfigPipeline(config, partial(write_manifest, path=manifest_path))
        self.scene = Scene(self.pipeline, self.launch, theme)
        self.dispatcher = ModeDispatcher(events)

    def draw(self) -> None:
        columns, rows = self.terminal.size()
        frame = Frame(columns, rows)
        self.scene.draw(frame)
        self.terminal.write(frame.render())

    def launch(self, item: ItemConfig) -> int:
        """Hand the terminal to ``item`` until it exits."""
        self.draw()
        with self.events.paused(), self.terminal.suspended():
            return self._launch_fn(item.path)

    def run(self) -> None:
        logger.info("session started with %s", self.manifest_path)
        with self.terminal.raw_mode():
            self.events.start()
            try:
                self._loop()
            finally:
                self.events.close()
        logger.info("session ended")

    def _loop(self) -> None:
        while True:
            self.draw()
            action = self.dispatcher.tick()
            if isinstance(action, Terminate):
                return
            if not isinstance(action, React):
                continue
            op = self.scene.react(action.reaction)
            if not isinstance(op, NoOp):
                logger.debug("committed %s", describe(op))
            if self.scene.quit_requested:
                return


def run_app(
    config: EngineConfig,
    manifest_path: Path,
    theme: UITheme = DEFAULT_THEME,
    tick_seconds: float | None = None,
) -> None:
    """Run an interactive session on the controlling terminal.

    ``tick_seconds`` overrides the manifest tick rate without persisting it.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    events = EventSource(stdin_fd, tick_seconds or config.setting.tick_seconds)
    App(config, manifest_path, terminal, events, theme).run()


__all__ = ["App", "run_app"]
