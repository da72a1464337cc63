"""Committed mutations of the tab/item list."""

from __future__ import annotations

from dataclasses import dataclass

from .manifest import ItemConfig, TabConfig


@dataclass(frozen=True)
class NoOp:
    """Nothing to apply."""


@dataclass(frozen=True)
class AppendTab:
    config: TabConfig


@dataclass(frozen=True)
class RemoveTab:
    tab_index: int


@dataclass(frozen=True)
class AppendGame:
    tab_index: int
    config: ItemConfig


@dataclass(frozen=True)
class RemoveGame:
    tab_index: int
    item_index: int


ConfigOp = NoOp | AppendTab | RemoveTab | AppendGame | RemoveGame

NO_OP = NoOp()


def describe(op: ConfigOp) -> str:
    """One-line human description used for logs and status hints."""
    if isinstance(op, AppendTab):
        return f"append tab {op.config.name!r}"
    if isinstance(op, RemoveTab):
        return f"remove tab #{op.tab_index}"
    if isinstance(op, AppendGame):
        return f"append game {op.config.name!r} to tab #{op.tab_index}"
    if isinstance(op, RemoveGame):
        return f"remove game #{op.item_index} from tab #{op.tab_index}"
    return "no change"
