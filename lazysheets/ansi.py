"""Display-width measurement and clipping for plain cell text.

Surface cells hold one printable character each, so these helpers only need
to measure and clip text; styling is applied per cell by the surface.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns.

    Escape sequences and control characters are dropped, tabs become spaces,
    and a wide character that would straddle the edge is left out.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in strip_ansi(text):
        if col >= max_cols:
            break
        w = char_display_width(ch, col)
        if ch == "\t":
            w = min(w, max_cols - col)
            out.append(" " * w)
            col += w
            continue
        if ch < " " or ch == "\x7f":
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def pad_text(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and right-pad it with spaces."""
    clipped = clip_text(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
