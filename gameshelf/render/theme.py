"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tab bar, game list, and instruction panel.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the views."""

    name: str
    reset: str
    reverse: str
    border: str
    title: str
    tab_selected: str
    tab_unselected: str
    item_name: str
    item_path: str
    item_index: str
    input_text: str
    input_focus: str
    key: str
    dim: str
    hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    border="\033[38;5;245m",
    title="\033[1;38;5;81m",
    tab_selected="\033[1;38;5;51m",
    tab_unselected="\033[38;5;221m",
    item_name="\033[38;5;252m",
    item_path="\033[2;38;5;250m",
    item_index="\033[38;5;109m",
    input_text="\033[38;5;221m",
    input_focus="\033[1;38;5;229m",
    key="\033[38;5;229m",
    dim="\033[2;38;5;250m",
    hint="\033[1;38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    tab_selected="\033[1;38;5;45m",
    tab_unselected="\033[38;5;110m",
    item_name="\033[38;5;153m",
    item_path="\033[2;38;5;110m",
    item_index="\033[38;5;73m",
    input_text="\033[38;5;117m",
    input_focus="\033[1;38;5;45m",
    key="\033[38;5;153m",
    dim="\033[2;38;5;110m",
    hint="\033[1;38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="\033[7m",
    border="",
    title="",
    tab_selected="",
    tab_unselected="",
    item_name="",
    item_path="",
    item_index="",
    input_text="",
    input_focus="",
    key="",
    dim="",
    hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    candidate = (name or "").strip().lower()
    return _THEMES.get(candidate, DEFAULT_THEME)
