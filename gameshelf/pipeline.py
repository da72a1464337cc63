"""Apply committed ConfigOps to the tab list and persist the result."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .errors import IndexOutOfRange
from .manifest import EngineConfig, TabConfig
from .ops import AppendGame, AppendTab, ConfigOp, NoOp, RemoveGame, RemoveTab, describe

logger = logging.getLogger(__name__)


class ConfigPipeline:
    """Single writer for ``config.tabs``.

    Range checks run before any mutation. ``save`` runs after the mutation;
    if it raises, the in-memory change is kept and the error propagates.
    """

    def __init__(self, config: EngineConfig, save: Callable[[EngineConfig], None]) -> None:
        self.config = config
        self._save = save

    @property
    def tabs(self) -> list[TabConfig]:
        return self.config.tabs

    def _tab(self, tab_index: int) -> TabConfig:
        if not self.tabs:
            raise IndexOutOfRange("There are no tabs")
        if not 0 <= tab_index < len(self.tabs):
            raise IndexOutOfRange(f"Tab index {tab_index} is out of range (0..{len(self.tabs) - 1})")
        return self.tabs[tab_index]

    def apply(self, op: ConfigOp) -> None:
        if isinstance(op, NoOp):
            return
        if isinstance(op, AppendTab):
            self.tabs.append(TabConfig(name=op.config.name, items=list(op.config.items)))
        elif isinstance(op, RemoveTab):
            self._tab(op.tab_index)
            del self.tabs[op.tab_index]
        elif isinstance(op, AppendGame):
            self._tab(op.tab_index).items.append(op.config)
        elif isinstance(op, RemoveGame):
            items = self._tab(op.tab_index).items
            if not 0 <= op.item_index < len(items):
                raise IndexOutOfRange(
                    f"Game index {op.item_index} is out of range in tab #{op.tab_index}"
                    f" ({len(items)} game(s))"
                )
            del items[op.item_index]
        else:
            raise TypeError(f"unknown config op: {op!r}")

        logger.info("applied: %s", describe(op))
        self._save(self.config)
