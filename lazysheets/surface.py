"""Character-grid drawing surface and frame output.

Widgets draw into sub-rectangles of a ``Surface``; the runtime loop then
composes the whole grid into one ANSI frame and writes it in a single call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ansi import char_display_width, clip_text

BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"
BOX_TOP_LEFT = "┌"
BOX_TOP_RIGHT = "┐"
BOX_BOTTOM_LEFT = "└"
BOX_BOTTOM_RIGHT = "┘"

# Second column of a wide character.
_WIDE_TAIL = ""


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, horizontal: int = 1, vertical: int = 1) -> Rect:
        """Return this rect shrunk by a margin on every side."""
        return Rect(
            x=self.x + horizontal,
            y=self.y + vertical,
            width=max(0, self.width - 2 * horizontal),
            height=max(0, self.height - 2 * vertical),
        )

    def split_rows(self, count: int) -> list[Rect]:
        """Divide into ``count`` equal-height bands stacked top to bottom.

        Integer division leaves any remainder rows unused at the bottom.
        """
        if count <= 0:
            return []
        band = self.height // count
        return [Rect(self.x, self.y + i * band, self.width, band) for i in range(count)]


@dataclass
class Cell:
    char: str = " "
    style: str = ""


class Surface:
    """Rectangular grid of styled cells."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.rows: list[list[Cell]] = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def set_cell(self, x: int, y: int, char: str, style: str = "") -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self.rows[y][x]
            cell.char = char
            cell.style = style

    def draw_text(self, x: int, y: int, text: str, style: str = "", max_width: int | None = None) -> int:
        """Write ``text`` starting at ``(x, y)`` and return the columns used.

        Text is clipped to ``max_width`` and to the surface edge.
        """
        if not (0 <= y < self.height) or x >= self.width:
            return 0
        limit = self.width - x if max_width is None else min(max_width, self.width - x)
        clipped = clip_text(text, limit)
        col = 0
        for ch in clipped:
            w = char_display_width(ch, col)
            if w == 0:
                continue
            self.set_cell(x + col, y, ch, style)
            if w == 2:
                self.set_cell(x + col + 1, y, _WIDE_TAIL, style)
            col += w
        return col

    def draw_box(self, rect: Rect, title: str = "", style: str = "", title_style: str = "") -> None:
        """Draw a single-line border around ``rect`` with an optional title."""
        if rect.width < 2 or rect.height < 2:
            return
        top = rect.y
        bottom = rect.bottom - 1
        left = rect.x
        right = rect.right - 1
        for x in range(left + 1, right):
            self.set_cell(x, top, BOX_HORIZONTAL, style)
            self.set_cell(x, bottom, BOX_HORIZONTAL, style)
        for y in range(top + 1, bottom):
            self.set_cell(left, y, BOX_VERTICAL, style)
            self.set_cell(right, y, BOX_VERTICAL, style)
        self.set_cell(left, top, BOX_TOP_LEFT, style)
        self.set_cell(right, top, BOX_TOP_RIGHT, style)
        self.set_cell(left, bottom, BOX_BOTTOM_LEFT, style)
        self.set_cell(right, bottom, BOX_BOTTOM_RIGHT, style)
        if title:
            self.draw_text(left + 1, top, title, title_style or style, max_width=rect.width - 2)

    def row_text(self, y: int) -> str:
        """Return the plain characters of row ``y`` (used by tests and dumps)."""
        return "".join(cell.char for cell in self.rows[y])

    def text_lines(self) -> list[str]:
        return [self.row_text(y) for y in range(self.height)]

    def compose(self, reset: str = "\033[0m") -> str:
        """Compose the grid into one ANSI frame string."""
        out: list[str] = ["\033[H\033[J"]
        for y, row in enumerate(self.rows):
            if y:
                out.append("\r\n")
            current = ""
            for cell in row:
                if cell.style != current:
                    if current and reset:
                        out.append(reset)
                    if cell.style:
                        out.append(cell.style)
                    current = cell.style
                out.append(cell.char)
            if current and reset:
                out.append(reset)
        return "".join(out)


def write_frame(fd: int, surface: Surface, reset: str = "\033[0m") -> None:
    os.write(fd, surface.compose(reset).encode("utf-8", errors="replace"))
