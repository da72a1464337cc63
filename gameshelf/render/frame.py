"""Cell buffer the views draw into, flushed to the terminal in one write."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .ansi import char_display_width

_EMPTY_CELL = (" ", "")


@dataclass(frozen=True)
class Rect:
    """Rectangular screen region in zero-based cell coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, margin: int = 1) -> Rect:
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )

    def split_rows(self, heights: Sequence[int | None]) -> list[Rect]:
        """Split vertically; one ``None`` entry takes whatever rows remain.

        Fixed heights are honored top-down and truncated when space runs out.
        """
        fixed = sum(h for h in heights if h is not None)
        flexible = max(0, self.height - fixed)
        out: list[Rect] = []
        y = self.y
        bottom = self.y + self.height
        for height in heights:
            want = flexible if height is None else height
            take = max(0, min(want, bottom - y))
            out.append(Rect(self.x, y, self.width, take))
            y += take
        return out


class Frame:
    """Grid of ``(char, style)`` cells.

    Styles are raw SGR prefixes; text passed to ``put`` must be plain.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells = [[_EMPTY_CELL] * self.width for _ in range(self.height)]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def put(self, x: int, y: int, text: str, style: str = "", max_width: int | None = None) -> int:
        """Write ``text`` at ``(x, y)``; returns the number of columns used."""
        if not 0 <= y < self.height or x >= self.width:
            return 0
        limit = self.width - x if max_width is None else min(max_width, self.width - x)
        row = self._cells[y]
        col = 0
        for ch in text:
            if ch in "\r\n":
                break
            w = char_display_width(ch, col)
            if ch == "\t":
                ch = " " * w
            if w == 0 or col + w > limit:
                if w == 0:
                    continue
                break
            if x + col >= 0:
                row[x + col] = (ch[0] if ch.isspace() else ch, style)
                for extra in range(1, w):
                    row[x + col + extra] = (" " if ch.isspace() else "", style)
            col += w
        return col

    def put_in(self, rect: Rect, row: int, text: str, style: str = "", indent: int = 0) -> int:
        """Write one line inside ``rect``, clipped to its width."""
        if not 0 <= row < rect.height or indent >= rect.width:
            return 0
        return self.put(rect.x + indent, rect.y + row, text, style, max_width=rect.width - indent)

    def fill(self, rect: Rect, style: str) -> None:
        for row in range(rect.height):
            self.put_in(rect, row, " " * rect.width, style)

    def box(self, rect: Rect, title: str = "", border_style: str = "", title_style: str = "") -> None:
        """Draw a rounded border around ``rect`` with an optional title."""
        if rect.width < 2 or rect.height < 2:
            return
        inner_w = rect.width - 2
        self.put(rect.x, rect.y, "╭" + "─" * inner_w + "╮", border_style)
        for row in range(1, rect.height - 1):
            self.put(rect.x, rect.y + row, "│", border_style)
            self.put(rect.x + rect.width - 1, rect.y + row, "│", border_style)
        self.put(rect.x, rect.y + rect.height - 1, "╰" + "─" * inner_w + "╯", border_style)
        if title and inner_w > 2:
            self.put(rect.x + 2, rect.y, f" {title} ", title_style, max_width=inner_w - 1)

    def row_text(self, y: int) -> str:
        """Plain text of one row, without styling."""
        return "".join(ch for ch, _ in self._cells[y])

    def text_rows(self) -> list[str]:
        return [self.row_text(y) for y in range(self.height)]

    def render(self) -> str:
        """Serialize the whole grid as one cursor-home + rows ANSI payload."""
        out: list[str] = ["\033[H"]
        for y, row in enumerate(self._cells):
            if y:
                out.append("\r\n")
            current = ""
            for ch, style in row:
                if style != current:
                    out.append("\033[0m")
                    out.append(style)
                    current = style
                out.append(ch)
            if current:
                out.append("\033[0m")
            out.append("\033[K")
        return "".join(out)
