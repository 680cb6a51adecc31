"""Main interactive read-render loop.

Each iteration renders the current widget set, then blocks for exactly one
input event and lets the dispatcher deliver it. Activation failures become a
status line; input failures end the loop.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable

from ..dispatcher import Dispatcher
from ..errors import LazySheetsError
from ..events import InputEvent
from ..input import read_event
from ..surface import Rect, Surface, write_frame
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def compose_frame(dispatcher: Dispatcher, columns: int, lines: int, status_message: str = "") -> Surface:
    """Render the dispatcher into a fresh surface, reserving a status row when needed."""
    surface = Surface(columns, lines)
    area = surface.area
    if status_message and surface.height > 1:
        area = Rect(0, 0, surface.width, surface.height - 1)
        surface.draw_text(0, surface.height - 1, status_message, dispatcher.theme.status)
    dispatcher.render(surface, area)
    return surface


def run_main_loop(
    dispatcher: Dispatcher,
    terminal: TerminalController,
    stdin_fd: int,
    stdout_fd: int,
    *,
    read: Callable[[int], InputEvent] = read_event,
) -> None:
    """Run until the quit key sets ``dispatcher.exit``.

    ``OSError`` from reading input propagates after the terminal is restored.
    """
    status_message = ""
    with terminal.raw_mode():
        while not dispatcher.exit:
            term = shutil.get_terminal_size((80, 24))
            surface = compose_frame(dispatcher, term.columns, term.lines, status_message)
            write_frame(stdout_fd, surface, dispatcher.theme.reset)

            status_message = ""
            try:
                dispatcher.tick(lambda: read(stdin_fd))
            except LazySheetsError as exc:
                logger.warning("activation failed: %s", exc)
                status_message = str(exc)
