"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, arrow keys, and SGR mouse reports.
"""

from __future__ import annotations

import os
import select

from .errors import InputClosedError
from .events import InputEvent, event_from_token

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS = {
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\x03": "CTRL_C",
}

_CSI_FINAL_TOKENS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> str:
    lead = first[0]
    if lead >= 0xF0:
        missing = 3
    elif lead >= 0xE0:
        missing = 2
    elif lead >= 0xC0:
        missing = 1
    else:
        missing = 0
    data = first
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_sgr_mouse(fd: int) -> str:
    # SGR mouse: ESC [ < btn ; col ; row (M/m)
    payload: list[bytes] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if part in {b"M", b"m"}:
            break
        payload.append(part)
        if len(payload) > 64:
            return "ESC"
    try:
        btn_s, col_s, row_s = b"".join(payload).decode("ascii").split(";")
        btn = int(btn_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return "ESC"
    if btn & 0b0100_0000:
        direction = "UP" if (btn & 0b11) == 0 else "DOWN"
        return f"MOUSE_WHEEL_{direction}:{col}:{row}"
    suffix = "DOWN" if part == b"M" else "UP"
    return f"MOUSE_{suffix}:{col}:{row}"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Return the next key token, or ``""`` on timeout or end of input."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    token = _CONTROL_TOKENS.get(ch)
    if token is not None:
        return token
    if ch != b"\x1b":
        if ch[0] >= 0x80:
            return _read_utf8_tail(fd, ch)
        return ch.decode("utf-8", errors="replace")

    # Escape / arrow key sequences; SS3 (ESC O) arrives from keypad-mode terminals.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    introducer = seq
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    token = _CSI_FINAL_TOKENS.get(seq)
    if token is not None:
        return token
    if introducer == b"[" and seq == b"<":
        return _read_sgr_mouse(fd)
    return "ESC"


def read_event(fd: int) -> InputEvent:
    """Block until one event arrives on ``fd``.

    Raises ``InputClosedError`` when the input stream has ended, and lets
    ``OSError`` from the read itself propagate.
    """
    token = read_key(fd)
    if token == "":
        raise InputClosedError("terminal input closed")
    return event_from_token(token)
