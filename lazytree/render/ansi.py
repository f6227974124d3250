"""ANSI-aware text measurement and clipping.

Escape sequences are kept verbatim and never count toward display width,
so styled tree rows can be fitted to the widget width.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Columns taken by ``ch`` when printed at column ``col``.

    A tab runs to the next multiple of ``TAB_STOP``; combining marks take no
    space; East Asian wide and fullwidth characters take two columns.
    """
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def _segments(text: str) -> Iterator[tuple[str, bool]]:
    """Split ``text`` into ``(chunk, is_escape)`` pairs, in order."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        if match.start() > pos:
            yield text[pos:match.start()], False
        yield match.group(0), True
        pos = match.end()
    if pos < len(text):
        yield text[pos:], False


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut a styled line down to ``max_cols`` display columns.

    Tabs become spaces so the cut lands on a rendered cell. Escapes directly
    after the cut (usually a reset) are kept; anything after the next visible
    text is dropped.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    full = False
    for chunk, is_escape in _segments(text):
        if is_escape:
            out.append(chunk)
            continue
        if full:
            break
        for ch in chunk:
            width = char_display_width(ch, col)
            if col + width > max_cols:
                full = True
                break
            out.append(" " * width if ch == "\t" else ch)
            col += width
        full = full or col >= max_cols
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Right-pad styled ``text`` with spaces to ``width`` display columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + " " * missing
