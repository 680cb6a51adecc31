"""Tests for focus-gated activation of picker items."""

from __future__ import annotations

import unittest
from unittest import mock

from lazysheets.arena import HandleArena
from lazysheets.errors import WorkbookError
from lazysheets.events import key_event
from lazysheets.widgets.picker_item import (
    ACTIVATED_MARKER,
    STYLE_ACTIVATED,
    STYLE_PLAIN,
    STYLE_SELECTED,
    PickerItem,
)

from sheet_fixtures import make_picker


class PickerItemActivationTests(unittest.TestCase):
    def _picker_with_callbacks(self, *, focused: bool = True):
        callbacks = [mock.Mock(), mock.Mock()]
        arena, handle, picker = make_picker(["a.xlsx", "b.xlsx"], focused=focused, callbacks=callbacks)
        return arena, handle, picker, callbacks

    def test_enter_on_selected_item_of_focused_picker_runs_callback(self) -> None:
        _arena, _handle, picker, callbacks = self._picker_with_callbacks()
        item = picker.item(0)

        item.handle_event(key_event("ENTER"))

        callbacks[0].execute.assert_called_once_with()
        self.assertEqual(item.text, f"{ACTIVATED_MARKER}a.xlsx")
        self.assertEqual(item.style, STYLE_ACTIVATED)

    def test_enter_on_unselected_item_is_ignored(self) -> None:
        _arena, _handle, picker, callbacks = self._picker_with_callbacks()

        picker.item(1).handle_event(key_event("ENTER"))

        callbacks[1].execute.assert_not_called()
        self.assertEqual(picker.item(1).text, "b.xlsx")

    def test_enter_is_ignored_when_parent_is_not_focused(self) -> None:
        _arena, _handle, picker, callbacks = self._picker_with_callbacks(focused=False)
        item = picker.item(0)

        item.handle_event(key_event("ENTER"))

        callbacks[0].execute.assert_not_called()
        self.assertEqual(item.text, "a.xlsx")
        self.assertEqual(item.style, STYLE_SELECTED)

    def test_other_keys_never_activate(self) -> None:
        _arena, _handle, picker, callbacks = self._picker_with_callbacks()

        for key in ("DOWN", "UP", " ", "l"):
            picker.item(0).handle_event(key_event(key))

        callbacks[0].execute.assert_not_called()

    def test_released_parent_makes_activation_a_noop(self) -> None:
        arena, handle, picker, callbacks = self._picker_with_callbacks()
        item = picker.item(0)

        arena.release(handle)
        item.handle_event(key_event("ENTER"))

        callbacks[0].execute.assert_not_called()

    def test_callback_failure_propagates_and_restores_visual_state(self) -> None:
        _arena, _handle, picker, callbacks = self._picker_with_callbacks()
        callbacks[0].execute.side_effect = WorkbookError("cannot open a.xlsx")
        item = picker.item(0)

        with self.assertRaises(WorkbookError):
            item.handle_event(key_event("ENTER"))

        self.assertEqual(item.text, "a.xlsx")
        self.assertEqual(item.style, STYLE_SELECTED)

    def test_activation_without_callback_only_marks_item(self) -> None:
        _arena, _handle, picker = make_picker(["solo"])
        item = picker.item(0)

        item.handle_event(key_event("ENTER"))

        self.assertEqual(item.text, f"{ACTIVATED_MARKER}solo")

    def test_moving_selection_away_clears_activated_marker(self) -> None:
        _arena, _handle, picker, callbacks = self._picker_with_callbacks()
        picker.item(0).handle_event(key_event("ENTER"))

        picker.handle_event(key_event("DOWN"))
        picker.item(1).handle_event(key_event("ENTER"))

        self.assertEqual(picker.item(0).text, "a.xlsx")
        self.assertEqual(picker.item(0).style, STYLE_PLAIN)
        self.assertEqual(picker.item(1).text, f"{ACTIVATED_MARKER}b.xlsx")
        callbacks[1].execute.assert_called_once_with()

    def test_initial_visual_state_follows_selection_flag(self) -> None:
        arena = HandleArena()

        selected = PickerItem(arena, "x", True, None)
        plain = PickerItem(arena, "y", False, None)

        self.assertTrue(selected.bordered)
        self.assertEqual(selected.style, STYLE_SELECTED)
        self.assertFalse(plain.bordered)
        self.assertEqual(plain.style, STYLE_PLAIN)

    def test_item_without_parent_never_activates(self) -> None:
        callback = mock.Mock()
        item = PickerItem(HandleArena(), "orphan", True, None, callback)

        item.handle_event(key_event("ENTER"))

        callback.execute.assert_not_called()


if __name__ == "__main__":
    unittest.main()
