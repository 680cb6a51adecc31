"""Event dispatch and render root.

The dispatcher owns the visible widget set and the receiver registry, and
both hold arena handles. Widget handles are owning: dropping a widget from
the set releases it. Receiver handles are not: the registry only observes
whether they still resolve and prunes the dead ones after each dispatch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .arena import Handle, HandleArena
from .events import KEY_QUIT, InputEvent
from .surface import Rect, Surface
from .ui_theme import DEFAULT_THEME, UITheme
from .widgets.text_box import TextBox

logger = logging.getLogger(__name__)


class Dispatcher:
    """Single-threaded owner of widgets, receivers and the exit flag."""

    def __init__(self, arena: HandleArena | None = None, theme: UITheme = DEFAULT_THEME) -> None:
        self.arena = arena if arena is not None else HandleArena()
        self.theme = theme
        self.widgets: list[Handle] = []
        self.receivers: list[Handle] = []
        self.exit = False
        self._placeholder = TextBox()

    def register(self, receiver: Handle) -> None:
        """Add a non-owning receiver reference; duplicates are delivered twice."""
        self.receivers.append(receiver)

    def add_widget(self, widget: Handle) -> None:
        self.widgets.append(widget)

    def replace_widgets(self, widgets: Iterable[Handle]) -> None:
        """Swap the whole widget set and release widgets no longer shown.

        Receivers of released widgets stay in the registry until the next
        prune, where they no longer resolve.
        """
        new_widgets = list(widgets)
        old_widgets = self.widgets
        self.widgets = new_widgets
        for handle in old_widgets:
            if handle not in new_widgets:
                self.arena.release(handle)
        logger.debug("widget set replaced: %d old, %d new", len(old_widgets), len(new_widgets))

    def prune(self) -> int:
        """Drop registry entries whose receiver was released; return how many."""
        before = len(self.receivers)
        self.receivers = [handle for handle in self.receivers if self.arena.is_live(handle)]
        removed = before - len(self.receivers)
        if removed:
            logger.debug("pruned %d dead receiver(s)", removed)
        return removed

    def tick(self, read_event: Callable[[], InputEvent]) -> None:
        """Read one event and deliver it unless it is the quit key.

        Errors from ``read_event`` are fatal and propagate unchanged.
        """
        event = read_event()
        if event.is_key_press(KEY_QUIT):
            self.exit = True
            return
        self.dispatch(event)

    def dispatch(self, event: InputEvent) -> None:
        """Deliver ``event`` to every receiver that is live when its turn comes.

        The registry is snapshotted first, so receivers registered by a
        callback during this pass only see the next event. A receiver released
        mid-pass is skipped. An exception from a receiver stops the pass and
        propagates after pruning.
        """
        try:
            for handle in list(self.receivers):
                receiver = self.arena.resolve(handle)
                if receiver is None:
                    continue
                receiver.handle_event(event)
        finally:
            self.prune()

    def render(self, surface: Surface, area: Rect | None = None) -> None:
        """Draw each widget into an equal-height band, in set order."""
        target = area if area is not None else surface.area
        if not self.widgets:
            self._placeholder.render(target, surface, self.theme)
            return
        for handle, band in zip(self.widgets, target.split_rows(len(self.widgets))):
            widget = self.arena.resolve(handle)
            if widget is None:
                continue
            widget.render(band, surface, self.theme)
