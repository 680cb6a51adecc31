"""Widgets drawn by the dispatcher.

Every widget renders with ``render(area, surface, theme)``. Widgets that
react to input also expose ``handle_event(event)`` and can be registered as
dispatcher receivers.
"""

from __future__ import annotations

from .picker import Picker
from .picker_item import ACTIVATED_MARKER, PickerItem
from .table import TableView, format_cell
from .text_box import TextBox

__all__ = [
    "ACTIVATED_MARKER",
    "Picker",
    "PickerItem",
    "TableView",
    "TextBox",
    "format_cell",
]
