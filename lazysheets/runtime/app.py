"""Runtime composition layer for lazysheets.

Builds the dispatcher and the initial file list, then starts the loop.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..dispatcher import Dispatcher
from ..reconfigure import BrowseOptions, OpenDirectoryCommand
from ..ui_theme import resolve_theme
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_dispatcher(root: Path, options: BrowseOptions, theme_name: str | None, no_color: bool) -> Dispatcher:
    """Create a dispatcher showing the file list of ``root``.

    Raises ``SourceReadError`` when ``root`` cannot be listed.
    """
    dispatcher = Dispatcher(theme=resolve_theme(theme_name, no_color=no_color))
    OpenDirectoryCommand(dispatcher, root, options).execute()
    return dispatcher


def run_browser(root: Path, options: BrowseOptions, theme_name: str | None = None, no_color: bool = False) -> None:
    """Initialize the browser for ``root`` and run the interactive loop."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    dispatcher = build_dispatcher(root.resolve(), options, theme_name, no_color)
    terminal = TerminalController(stdin_fd, stdout_fd)
    logger.info("browsing %s (extension %s)", root, options.extension)
    run_main_loop(dispatcher, terminal, stdin_fd, stdout_fd)
    logger.info("session ended")


def stdin_is_terminal() -> bool:
    try:
        return os.isatty(sys.stdin.fileno())
    except (AttributeError, OSError, ValueError):
        return False
