"""Bordered panel holding a few lines of text."""

from __future__ import annotations

from ..surface import Rect, Surface
from ..ui_theme import UITheme


class TextBox:
    def __init__(self, text: str = "", title: str = "", style: str = "placeholder") -> None:
        self.text = text
        self.title = title
        self.style = style

    def render(self, area: Rect, surface: Surface, theme: UITheme) -> None:
        if area.is_empty:
            return
        surface.draw_box(area, title=self.title, style=theme.border, title_style=theme.title)
        inner = area.inner()
        style = getattr(theme, self.style, "")
        for row, line in enumerate(self.text.splitlines()[: inner.height]):
            surface.draw_text(inner.x, inner.y + row, line, style, max_width=inner.width)
