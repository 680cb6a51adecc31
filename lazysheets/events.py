"""Input event value type shared by the dispatcher and widgets.

Key tokens come from ``lazysheets.input.read_key``; this module only wraps
them so receivers can tell key presses from other terminal events.
"""

from __future__ import annotations

from dataclasses import dataclass

KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_LEFT = "LEFT"
KEY_ENTER = "ENTER"
KEY_BACKSPACE = "BACKSPACE"
KEY_QUIT = "q"

MOUSE_PREFIX = "MOUSE"


@dataclass(frozen=True)
class InputEvent:
    """One decoded terminal event.

    ``kind`` is ``"key"`` for key presses and ``"mouse"`` for pointer reports.
    Terminals in raw mode only report presses, so there is no release kind.
    """

    kind: str
    key: str

    @property
    def is_key(self) -> bool:
        return self.kind == "key"

    def is_key_press(self, key: str) -> bool:
        return self.kind == "key" and self.key == key


def event_from_token(token: str) -> InputEvent:
    """Classify a ``read_key`` token as a key or mouse event."""
    if token.startswith(MOUSE_PREFIX):
        return InputEvent(kind="mouse", key=token)
    return InputEvent(kind="key", key=token)


def key_event(key: str) -> InputEvent:
    return InputEvent(kind="key", key=key)
