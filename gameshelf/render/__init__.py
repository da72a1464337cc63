"""Drawing surface shared by the scene views."""

from .frame import Frame, Rect
from .layout import scene_layout
from .theme import DEFAULT_THEME, UITheme, available_theme_names, resolve_theme

__all__ = [
    "Frame",
    "Rect",
    "scene_layout",
    "UITheme",
    "DEFAULT_THEME",
    "available_theme_names",
    "resolve_theme",
]
