"""Screen split between tab bar, game list, and instruction panel."""

from __future__ import annotations

from .frame import Rect

TAB_BAR_HEIGHT = 3
INSTRUCTION_HEIGHT = 8


def scene_layout(width: int, height: int) -> tuple[Rect, Rect, Rect]:
    """Return ``(tab_bar, content, instruction)`` regions stacked top-down.

    The content list absorbs all rows not used by the fixed-height panels and
    collapses first when the terminal is too short.
    """
    tab_bar, content, instruction = Rect(0, 0, width, height).split_rows(
        [TAB_BAR_HEIGHT, None, INSTRUCTION_HEIGHT]
    )
    return tab_bar, content, instruction
