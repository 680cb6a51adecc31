"""Read-only grid preview of one worksheet."""

from __future__ import annotations

from ..ansi import display_width, pad_text
from ..sources.workbook import CELL_BOOL, CELL_EMPTY, CELL_INT, CELL_REAL, CELL_TEXT, SheetCell
from ..surface import Rect, Surface
from ..ui_theme import UITheme

NUMERIC_COLUMN_WIDTH = 8
COLUMN_GAP = 1


def format_cell(cell: SheetCell) -> str:
    """Return the display text of one cell; reals use two decimals."""
    if cell.kind == CELL_TEXT:
        return str(cell.value)
    if cell.kind == CELL_INT:
        return str(cell.value)
    if cell.kind == CELL_REAL:
        return f"{cell.value:.2f}"
    if cell.kind == CELL_BOOL:
        return "true" if cell.value else "false"
    return ""


def _cell_width(cell: SheetCell) -> int:
    if cell.kind == CELL_TEXT:
        return display_width(str(cell.value))
    if cell.kind in {CELL_INT, CELL_REAL, CELL_BOOL}:
        return NUMERIC_COLUMN_WIDTH
    return 0


def column_widths(rows: list[list[SheetCell]]) -> list[int]:
    """Widest cell per column; ragged rows only widen the columns they reach."""
    widths: list[int] = []
    for row in rows:
        for col, cell in enumerate(row):
            if col >= len(widths):
                widths.append(0)
            widths[col] = max(widths[col], _cell_width(cell))
    return widths


class TableView:
    """Renders rows top-down, one terminal row per sheet row.

    Cells are padded or cut to their column width; columns and rows that do
    not fit the panel are left out. The first row uses the header style.
    """

    def __init__(self, title: str, rows: list[list[SheetCell]]) -> None:
        self.title = title
        self.rows = rows
        self.widths = column_widths(rows)

    def __repr__(self) -> str:
        return f"TableView(title={self.title!r}, rows={len(self.rows)})"

    def render(self, area: Rect, surface: Surface, theme: UITheme) -> None:
        if area.is_empty:
            return
        surface.draw_box(area, title=self.title, style=theme.border, title_style=theme.title)
        inner = area.inner()
        if inner.is_empty:
            return
        if not self.rows or not any(self.widths):
            surface.draw_text(inner.x, inner.y, "(empty sheet)", theme.placeholder, max_width=inner.width)
            return

        for row_idx, row in enumerate(self.rows[: inner.height]):
            y = inner.y + row_idx
            style = theme.table_header if row_idx == 0 else theme.table_cell
            x = inner.x
            for col_idx, cell in enumerate(row):
                width = self.widths[col_idx]
                if width == 0:
                    continue
                if x >= inner.right:
                    break
                surface.draw_text(x, y, pad_text(format_cell(cell), width), style, max_width=inner.right - x)
                x += width + COLUMN_GAP
