"""Selectable leaf row of a picker.

An item never decides its own selection: the owning ``Picker`` pushes the
flag down after every index change. The item only looks its parent up, via
a handle, to check the focus gate when the activation key arrives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..events import KEY_ENTER, InputEvent
from ..surface import Rect, Surface
from ..ui_theme import UITheme

if TYPE_CHECKING:
    from ..arena import Handle, HandleArena
    from .picker import Picker

ACTIVATED_MARKER = "» "

STYLE_PLAIN = "item"
STYLE_SELECTED = "item_selected"
STYLE_ACTIVATED = "item_activated"


class PickerItem:
    """One row of a picker, with an optional activation command.

    ``callback`` is any object with an ``execute()`` method; its exceptions
    propagate out of ``handle_event``.
    """

    def __init__(
        self,
        arena: HandleArena,
        text: str,
        selected: bool,
        parent: Handle | None,
        callback: object | None = None,
    ) -> None:
        self.arena = arena
        self.label = text
        self.text = text
        self.parent = parent
        self.callback = callback
        self.selected = False
        self.bordered = False
        self.style = STYLE_PLAIN
        self.set_selected(selected)

    def __repr__(self) -> str:
        return f"PickerItem(text={self.text!r}, selected={self.selected})"

    def set_selected(self, selected: bool) -> None:
        """Apply the selection flag and its derived border/style.

        Losing the selection also drops any activated marker.
        """
        self.selected = bool(selected)
        if not self.selected:
            self.text = self.label
        self.bordered = self.selected
        self.style = STYLE_SELECTED if self.selected else STYLE_PLAIN

    def parent_picker(self) -> Picker | None:
        return self.arena.resolve(self.parent)

    def is_activatable(self) -> bool:
        if not self.selected:
            return False
        parent = self.parent_picker()
        return parent is not None and bool(parent.focused)

    def handle_event(self, event: InputEvent) -> None:
        if not event.is_key_press(KEY_ENTER):
            return
        if not self.is_activatable():
            return

        previous = (self.text, self.style)
        self.text = f"{ACTIVATED_MARKER}{self.label}"
        self.style = STYLE_ACTIVATED
        if self.callback is None:
            return
        try:
            self.callback.execute()
        except Exception:
            self.text, self.style = previous
            raise

    def render(self, area: Rect, surface: Surface, theme: UITheme) -> None:
        if area.is_empty:
            return
        style = getattr(theme, self.style, "")
        text = self.text
        if self.selected and theme.selected_marker:
            text = f"{theme.selected_marker}{text}"
        if self.bordered and area.height >= 3:
            surface.draw_box(area, style=style)
            inner = area.inner()
            surface.draw_text(inner.x, inner.y, text, style, max_width=inner.width)
            return
        surface.draw_text(area.x, area.y, text, style, max_width=area.width)
