"""Column arithmetic for rows that carry SGR escapes.

Escapes are kept as-is and take no columns; wide glyphs take two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Columns taken by ``ch`` when drawn at column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def _segments(text: str):
    """Yield ``(is_escape, chunk)`` pairs in order."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        if match.start() > pos:
            yield False, text[pos : match.start()]
        yield True, match.group(0)
        pos = match.end()
    if pos < len(text):
        yield False, text[pos:]


def display_width(text: str) -> int:
    col = 0
    for is_escape, chunk in _segments(text):
        if is_escape:
            continue
        for ch in chunk:
            col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` down to ``max_cols`` columns, expanding tabs to spaces.

    Escapes before the cut are kept so the visible prefix keeps its styling.
    """
    if max_cols <= 0:
        return ""

    kept: list[str] = []
    col = 0
    for is_escape, chunk in _segments(text):
        if is_escape:
            kept.append(chunk)
            continue
        for ch in chunk:
            if col >= max_cols:
                return "".join(kept)
            width = char_display_width(ch, col)
            if col + width > max_cols:
                return "".join(kept)
            kept.append(" " * width if ch == "\t" else ch)
            col += width
    return "".join(kept)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` and pad with spaces up to it."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
