"""Tests for the read-render loop, status line, and terminal restoration."""

from __future__ import annotations

import os
import unittest
from contextlib import contextmanager
from unittest import mock

from lazysheets.dispatcher import Dispatcher
from lazysheets.errors import WorkbookError
from lazysheets.events import InputEvent, key_event
from lazysheets.runtime.loop import compose_frame, run_main_loop
from lazysheets.surface import Surface
from lazysheets.ui_theme import PLAIN_THEME

from sheet_fixtures import make_picker


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


def _dispatcher_with_picker(callbacks=None) -> Dispatcher:
    dispatcher = Dispatcher(theme=PLAIN_THEME)
    labels = ["a.xlsx", "b.xlsx"]
    _arena, handle, picker = make_picker(labels, callbacks=callbacks, arena=dispatcher.arena)
    for item in picker.items:
        dispatcher.register(item)
    dispatcher.register(handle)
    dispatcher.add_widget(handle)
    return dispatcher


def _scripted(*keys: str):
    pending = [key_event(key) for key in keys]

    def read(_fd: int) -> InputEvent:
        return pending.pop(0)

    return read


class RunMainLoopTests(unittest.TestCase):
    def _run(self, dispatcher: Dispatcher, read) -> tuple[_FakeTerminal, list[Surface]]:
        frames: list[Surface] = []
        terminal = _FakeTerminal()
        with mock.patch(
            "lazysheets.runtime.loop.shutil.get_terminal_size",
            return_value=os.terminal_size((30, 8)),
        ), mock.patch(
            "lazysheets.runtime.loop.write_frame",
            side_effect=lambda _fd, surface, _reset: frames.append(surface),
        ):
            run_main_loop(dispatcher, terminal, 0, 1, read=read)
        return terminal, frames

    def test_renders_before_each_event_until_quit(self) -> None:
        dispatcher = _dispatcher_with_picker()

        terminal, frames = self._run(dispatcher, _scripted("DOWN", "q"))

        self.assertTrue(dispatcher.exit)
        self.assertEqual(len(frames), 2)
        self.assertTrue(frames[0].row_text(2)[2:].startswith("> a.xlsx"))
        self.assertTrue(frames[1].row_text(5)[2:].startswith("> b.xlsx"))
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_activation_failure_is_shown_on_status_row_then_cleared(self) -> None:
        failing = mock.Mock()
        failing.execute.side_effect = WorkbookError("cannot open a.xlsx: bad zip")
        dispatcher = _dispatcher_with_picker(callbacks=[failing, None])

        with self.assertLogs("lazysheets.runtime.loop", level="WARNING") as logs:
            _terminal, frames = self._run(dispatcher, _scripted("ENTER", "DOWN", "q"))

        self.assertEqual(len(frames), 3)
        self.assertTrue(frames[1].row_text(7).startswith("cannot open a.xlsx: bad zip"))
        self.assertTrue(frames[2].row_text(7).startswith("└"))
        self.assertIn("activation failed", logs.output[0])

    def test_input_failure_propagates_and_restores_terminal(self) -> None:
        dispatcher = _dispatcher_with_picker()

        def broken(_fd: int) -> InputEvent:
            raise OSError("stdin gone")

        terminal = _FakeTerminal()
        with mock.patch("lazysheets.runtime.loop.write_frame"), self.assertRaises(OSError):
            run_main_loop(dispatcher, terminal, 0, 1, read=broken)

        self.assertEqual(terminal.exited, 1)


class ComposeFrameTests(unittest.TestCase):
    def test_status_row_shrinks_widget_area(self) -> None:
        dispatcher = _dispatcher_with_picker()

        surface = compose_frame(dispatcher, 20, 6, "oops")

        self.assertTrue(surface.row_text(4).startswith("└"))
        self.assertTrue(surface.row_text(5).startswith("oops"))


if __name__ == "__main__":
    unittest.main()
