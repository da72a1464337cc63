"""Scene views and the reaction router tying them together."""

from .content import ContentView
from .instruction import InstructionPanel
from .navtab import TabBarView
from .scene import Scene

__all__ = [
    "Scene",
    "TabBarView",
    "ContentView",
    "InstructionPanel",
]
