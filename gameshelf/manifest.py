"""Manifest model and TOML persistence.

The manifest lists tabs of launchable programs plus a ``[setting]`` table.
Discovery walks from the working directory up to the filesystem root, then
falls back to the per-user config directory.

Parsing is lenient: tabs without a name and items missing a name or path are
dropped rather than rejecting the whole file.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w
from platformdirs import user_config_dir

from .errors import PersistenceFailure

logger = logging.getLogger(__name__)

APP_NAME = "gameshelf"
MANIFEST_CONFIG_NAME = "gameshelf.toml"
USER_MANIFEST_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / MANIFEST_CONFIG_NAME

DEFAULT_TAB_NAME = "Default"
DEFAULT_TICK_RATE_MS = 250
MIN_TICK_RATE_MS = 10


@dataclass
class ItemConfig:
    """One launchable program."""

    name: str
    path: str


@dataclass
class TabConfig:
    """A named group of programs, in display order."""

    name: str
    items: list[ItemConfig] = field(default_factory=list)


@dataclass
class SettingConfig:
    is_close_after_game_launch: bool = False
    tick_rate_ms: int = DEFAULT_TICK_RATE_MS

    @property
    def tick_seconds(self) -> float:
        return self.tick_rate_ms / 1000.0


@dataclass
class EngineConfig:
    tabs: list[TabConfig] = field(default_factory=list)
    setting: SettingConfig = field(default_factory=SettingConfig)

    @classmethod
    def default(cls) -> EngineConfig:
        return cls(tabs=[TabConfig(name=DEFAULT_TAB_NAME)], setting=SettingConfig())


def _parse_item(data: object) -> ItemConfig | None:
    if not isinstance(data, dict):
        return None
    name = data.get("name")
    path = data.get("path")
    if not isinstance(name, str) or not isinstance(path, str):
        return None
    return ItemConfig(name=name, path=path)


def _parse_tab(data: object) -> TabConfig | None:
    if not isinstance(data, dict):
        return None
    name = data.get("name")
    if not isinstance(name, str):
        return None
    raw_items = data.get("item", [])
    if not isinstance(raw_items, list):
        raw_items = []
    items = [item for item in (_parse_item(raw) for raw in raw_items) if item is not None]
    return TabConfig(name=name, items=items)


def _parse_setting(data: object) -> SettingConfig:
    setting = SettingConfig()
    if not isinstance(data, dict):
        return setting
    close_after = data.get("is_close_after_game_launch")
    if isinstance(close_after, bool):
        setting.is_close_after_game_launch = close_after
    tick_rate = data.get("tick_rate")
    if isinstance(tick_rate, int) and not isinstance(tick_rate, bool):
        setting.tick_rate_ms = max(MIN_TICK_RATE_MS, tick_rate)
    return setting


def parse_manifest(data: dict[str, object]) -> EngineConfig | None:
    """Build an ``EngineConfig`` from decoded TOML, or ``None`` without ``[[tab]]``."""
    raw_tabs = data.get("tab")
    if not isinstance(raw_tabs, list):
        return None
    tabs = [tab for tab in (_parse_tab(raw) for raw in raw_tabs) if tab is not None]
    return EngineConfig(tabs=tabs, setting=_parse_setting(data.get("setting")))


def dump_manifest(config: EngineConfig) -> dict[str, object]:
    """Inverse of ``parse_manifest``: plain TOML-ready data."""
    return {
        "tab": [
            {
                "name": tab.name,
                "item": [{"name": item.name, "path": item.path} for item in tab.items],
            }
            for tab in config.tabs
        ],
        "setting": {
            "is_close_after_game_launch": config.setting.is_close_after_game_launch,
            "tick_rate": config.setting.tick_rate_ms,
        },
    }


def search_manifest(start: Path) -> Path | None:
    """Return the nearest manifest at or above ``start``, else the user one."""
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_CONFIG_NAME
        if candidate.is_file():
            return candidate
    if USER_MANIFEST_PATH.is_file():
        return USER_MANIFEST_PATH
    return None


def load_manifest(path: Path) -> EngineConfig | None:
    """Read and parse ``path``; ``None`` when it is unreadable or malformed."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("cannot read manifest %s: %s", path, exc)
        return None
    config = parse_manifest(data)
    if config is None:
        logger.warning("manifest %s has no [[tab]] entries", path)
    return config


def write_manifest(config: EngineConfig, path: Path) -> None:
    """Persist ``config`` to ``path``.

    Raises ``PersistenceFailure`` when the file cannot be written.
    """
    try:
        content = tomli_w.dumps(dump_manifest(config))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        raise PersistenceFailure(f"Failed to save {path.name}: {exc}") from exc
    logger.debug("manifest written to %s", path)


def init_config(start: Path, explicit_path: Path | None = None) -> tuple[EngineConfig, Path]:
    """Resolve the session configuration and where it is persisted.

    Falls back to the built-in default (one empty tab) and writes it out
    immediately when no usable manifest exists.
    """
    path = explicit_path if explicit_path is not None else search_manifest(start)
    config = load_manifest(path) if path is not None and path.is_file() else None
    if config is not None:
        logger.info("loaded %d tab(s) from %s", len(config.tabs), path)
        return config, path

    config = EngineConfig.default()
    if path is None:
        path = start / MANIFEST_CONFIG_NAME
    elif path.exists():
        # Unusable manifest; leave it on disk until the user saves a change.
        logger.warning("using default tabs; %s is left untouched", path)
        return config, path
    try:
        write_manifest(config, path)
    except PersistenceFailure as exc:
        logger.error("%s", exc)
    else:
        logger.info("wrote default manifest to %s", path)
    return config, path
