"""Single-selection list panel and its navigation state machine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..events import KEY_BACKSPACE, KEY_DOWN, KEY_LEFT, KEY_UP, InputEvent
from ..surface import Rect, Surface
from ..ui_theme import UITheme

if TYPE_CHECKING:
    from ..arena import Handle, HandleArena
    from .picker_item import PickerItem

BACK_KEYS = frozenset({KEY_BACKSPACE, KEY_LEFT, "h"})


class Picker:
    """Ordered items with exactly one selected row.

    Items are owned through arena handles: releasing the picker's handle
    releases every item with it. ``index`` wraps in both directions, and after
    every move all items get their ``selected`` flag recomputed, which is
    linear in the number of items.

    ``focused`` is set by whoever makes this list current. Navigation never
    changes it; items read it before running their activation command.
    """

    def __init__(
        self,
        arena: HandleArena,
        items: list[Handle],
        title: str,
        index: int | None = None,
        *,
        focused: bool = False,
        back: object | None = None,
        empty_message: str = "",
    ) -> None:
        self.arena = arena
        self.items = list(items)
        self.title = title
        self.focused = focused
        self.back = back
        self.empty_message = empty_message
        start = index if index is not None else 0
        self.index = max(0, min(start, len(self.items) - 1)) if self.items else 0
        self.update_selection()

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Picker(title={self.title!r}, index={self.index}, items={len(self.items)}, focused={self.focused})"

    def owned_handles(self) -> list[Handle]:
        return list(self.items)

    def item(self, position: int) -> PickerItem | None:
        if not (0 <= position < len(self.items)):
            return None
        return self.arena.resolve(self.items[position])

    def selected_item(self) -> PickerItem | None:
        return self.item(self.index) if self.items else None

    def increment(self) -> None:
        if not self.items:
            return
        self.index = (self.index + 1) % len(self.items)
        self.update_selection()

    def decrement(self) -> None:
        if not self.items:
            return
        self.index = (self.index - 1) % len(self.items)
        self.update_selection()

    def update_selection(self) -> None:
        """Push the current index down into every item's selected flag."""
        for position in range(len(self.items)):
            item = self.item(position)
            if item is not None:
                item.set_selected(position == self.index)

    def handle_event(self, event: InputEvent) -> None:
        if not event.is_key:
            return
        if event.key == KEY_UP:
            self.decrement()
        elif event.key == KEY_DOWN:
            self.increment()
        elif event.key in BACK_KEYS and self.focused and self.back is not None:
            self.back.execute()

    def render(self, area: Rect, surface: Surface, theme: UITheme) -> None:
        if area.is_empty:
            return
        surface.draw_box(area, title=self.title, style=theme.border, title_style=theme.title)
        inner = area.inner()
        if inner.is_empty:
            return
        if not self.items:
            if self.empty_message:
                surface.draw_text(inner.x, inner.y, self.empty_message, theme.placeholder, max_width=inner.width)
            return

        for position, band in enumerate(inner.split_rows(len(self.items))):
            if band.height <= 0:
                # Too many rows for the panel; show a one-line-per-item listing instead.
                self._render_compact(inner, surface, theme)
                return
            item = self.item(position)
            if item is not None:
                item.render(band, surface, theme)

    def _render_compact(self, inner: Rect, surface: Surface, theme: UITheme) -> None:
        # Keep the selected row visible by scrolling the window.
        start = max(0, self.index - inner.height + 1)
        for row in range(inner.height):
            position = start + row
            item = self.item(position)
            if item is None:
                continue
            item.render(Rect(inner.x, inner.y + row, inner.width, 1), surface, theme)
