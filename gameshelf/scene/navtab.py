"""Tab bar view: tab cursor plus the "Navigation" strip."""

from __future__ import annotations

from ..manifest import TabConfig
from ..ops import AppendTab, ConfigOp, RemoveTab
from ..render import Frame, Rect, UITheme
from ..render.ansi import display_width

SEPARATOR = " │ "


class TabBarView:
    """Cyclic cursor over the shared tab list.

    ``index`` is ``None`` only while the list is empty.
    """

    def __init__(self, tabs: list[TabConfig]) -> None:
        self.tabs = tabs
        self.index: int | None = 0 if tabs else None

    @property
    def count(self) -> int:
        return len(self.tabs)

    def next(self) -> None:
        if not self.tabs:
            return
        self.index = 0 if self.index is None else (self.index + 1) % self.count

    def previous(self) -> None:
        if not self.tabs:
            return
        self.index = self.count - 1 if self.index is None else (self.index + self.count - 1) % self.count

    def current_tab(self) -> TabConfig | None:
        if self.index is None:
            return None
        return self.tabs[self.index]

    def on_list_mutated(self, op: ConfigOp) -> None:
        if isinstance(op, AppendTab):
            self.index = self.count - 1
        elif isinstance(op, RemoveTab):
            self.index = 0 if self.tabs else None
        elif self.index is not None and self.index >= self.count:
            self.index = self.count - 1 if self.tabs else None

    def draw(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        frame.box(area, "Navigation", theme.border, theme.title)
        inner = area.inner()
        if inner.is_empty:
            return
        if not self.tabs:
            frame.put_in(inner, 0, "(no tabs)", theme.dim)
            return

        labels = [f"{idx}:{tab.name}" for idx, tab in enumerate(self.tabs)]
        first = self._first_visible(labels, inner.width)
        col = 0
        if first > 0:
            col += frame.put_in(inner, 0, "‹ ", theme.dim)
        for idx in range(first, len(labels)):
            if idx > first:
                col += frame.put_in(inner, 0, SEPARATOR, theme.border, indent=col)
            style = theme.reverse + theme.tab_selected if idx == self.index else theme.tab_unselected
            col += frame.put_in(inner, 0, labels[idx], style, indent=col)
            if col >= inner.width:
                break

    def _first_visible(self, labels: list[str], width: int) -> int:
        """Leftmost tab to draw so the selected title stays on screen."""
        selected = self.index or 0
        first = 0
        while first < selected:
            used = sum(display_width(label) for label in labels[first : selected + 1])
            used += display_width(SEPARATOR) * (selected - first)
            if first > 0:
                used += 2
            if used <= width:
                break
            first += 1
        return first
