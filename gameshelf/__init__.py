"""gameshelf - browse programs grouped into tabs and launch them from a terminal."""

__version__ = "0.1.0"

from .manifest import EngineConfig, ItemConfig, SettingConfig, TabConfig
from .ops import NO_OP, AppendGame, AppendTab, ConfigOp, NoOp, RemoveGame, RemoveTab

__all__ = [
    "EngineConfig",
    "ItemConfig",
    "SettingConfig",
    "TabConfig",
    "ConfigOp",
    "NoOp",
    "NO_OP",
    "AppendTab",
    "RemoveTab",
    "AppendGame",
    "RemoveGame",
]
