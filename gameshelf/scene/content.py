"""Game list view for the active tab."""

from __future__ import annotations

from ..manifest import ItemConfig, TabConfig
from ..ops import ConfigOp, RemoveGame
from ..render import Frame, Rect, UITheme
from ..render.ansi import clip_ansi_line, display_width

MAX_NAME_COLUMN = 32


class ContentView:
    """Item cursor within the active tab of the shared tab list.

    ``cursor`` is ``None`` when nothing is selected; switching tabs clears it.
    """

    def __init__(self, tabs: list[TabConfig]) -> None:
        self.tabs = tabs
        self.tab_index: int | None = 0 if tabs else None
        self.cursor: int | None = None
        self.scroll = 0

    @property
    def items(self) -> list[ItemConfig]:
        if self.tab_index is None or self.tab_index >= len(self.tabs):
            return []
        return self.tabs[self.tab_index].items

    def set_tab(self, index: int | None) -> None:
        self.tab_index = index
        self.cursor = None
        self.scroll = 0

    def next_game(self) -> None:
        count = len(self.items)
        if count == 0:
            return
        self.cursor = 0 if self.cursor is None else (self.cursor + 1) % count

    def previous_game(self) -> None:
        count = len(self.items)
        if count == 0:
            return
        self.cursor = count - 1 if self.cursor is None else (self.cursor + count - 1) % count

    def current_item(self) -> ItemConfig | None:
        items = self.items
        if self.cursor is None or not 0 <= self.cursor < len(items):
            return None
        return items[self.cursor]

    def on_list_mutated(self, op: ConfigOp) -> None:
        """Keep the cursor pointing at a live item after a game op."""
        if isinstance(op, RemoveGame) and op.tab_index == self.tab_index and self.cursor is not None:
            if op.item_index == self.cursor:
                self.cursor = 0 if self.items else None
            elif op.item_index < self.cursor:
                self.cursor -= 1
        if self.cursor is not None and self.cursor >= len(self.items):
            self.cursor = len(self.items) - 1 if self.items else None

    def draw(self, frame: Frame, area: Rect, theme: UITheme) -> None:
        if self.tab_index is None or self.tab_index >= len(self.tabs):
            frame.box(area, "Main", theme.border, theme.title)
            frame.put_in(area.inner(), 0, "No tabs. Press Ctrl+T to add one.", theme.dim)
            return

        frame.box(area, self.tabs[self.tab_index].name, theme.border, theme.title)
        inner = area.inner()
        if inner.is_empty:
            return
        items = self.items
        if not items:
            frame.put_in(inner, 0, "No games in this tab. Press Ctrl+N to add one.", theme.dim)
            return

        self._scroll_to_cursor(inner.height)
        index_w = len(str(len(items) - 1))
        name_w = min(MAX_NAME_COLUMN, max(display_width(item.name) for item in items))
        for row in range(inner.height):
            idx = self.scroll + row
            if idx >= len(items):
                break
            item = items[idx]
            selected = idx == self.cursor
            if selected:
                frame.fill(Rect(inner.x, inner.y + row, inner.width, 1), theme.reverse)
            base = theme.reverse if selected else ""
            col = frame.put_in(inner, row, "› " if selected else "  ", base + theme.title)
            col += frame.put_in(inner, row, f"{idx:>{index_w}}  ", base + theme.item_index, indent=col)
            frame.put_in(inner, row, clip_ansi_line(item.name, name_w), base + theme.item_name, indent=col)
            col += name_w + 2
            frame.put_in(inner, row, item.path, base + theme.item_path, indent=col)

    def _scroll_to_cursor(self, rows: int) -> None:
        max_scroll = max(0, len(self.items) - rows)
        if self.cursor is not None:
            if self.cursor < self.scroll:
                self.scroll = self.cursor
            elif self.cursor >= self.scroll + rows:
                self.scroll = self.cursor - rows + 1
        self.scroll = max(0, min(self.scroll, max_scroll))
