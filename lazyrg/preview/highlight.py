"""Decoding, control-byte escaping, and Pygments colouring for file previews.

Only the raw fallback renderer colours text here; the external pager does its
own highlighting.
"""

from __future__ import annotations

import functools
import re
from pathlib import Path

DEFAULT_STYLE = "monokai"
SOURCE_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")

# C0 controls other than tab/newline/carriage return, DEL, and C1 controls.
_UNSAFE_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def decode_bytes(data: bytes) -> str:
    """Decode file bytes, trying each of ``SOURCE_ENCODINGS`` in order."""
    for encoding in SOURCE_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Replace control bytes that would move the cursor or ring the bell with ``\\xNN``."""
    return _UNSAFE_CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


@functools.lru_cache(maxsize=None)
def resolve_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else ``DEFAULT_STYLE``."""
    from pygments.styles import get_style_by_name
    from pygments.util import ClassNotFound

    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@functools.lru_cache(maxsize=None)
def _terminal_formatter(style: str):
    from pygments.formatters import TerminalFormatter

    return TerminalFormatter(style=style)


def _lexer_for(path: Path, source: str):
    from pygments.lexers import TextLexer, get_lexer_for_filename
    from pygments.util import ClassNotFound

    # stripnl=False keeps leading and trailing blank lines so numbering lines up.
    try:
        return get_lexer_for_filename(path.name, source, stripnl=False)
    except ClassNotFound:
        return TextLexer(stripnl=False)


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Return ``source`` with ANSI colours chosen by the lexer for ``path``.

    Unknown file types use the plain-text lexer.
    """
    from pygments import highlight

    return highlight(source, _lexer_for(path, source), _terminal_formatter(resolve_style(style)))
