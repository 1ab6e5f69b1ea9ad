"""Built-in plain-text renderer used when the highlighting pager is missing.

Every physical line gets a right-aligned 1-based number; the target line is
marked with an arrow gutter and emphasised.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import FileOpenError
from .highlight import DEFAULT_STYLE, colorize_source, decode_bytes, sanitize_terminal_text

logger = logging.getLogger(__name__)

TARGET_MARKER = "→ "
PLAIN_GUTTER = "  "
TARGET_EMPHASIS = "\033[1;38;5;99m"
RESET = "\033[0m"


def physical_lines(text: str) -> list[str]:
    """Split text on newlines; a trailing newline does not add an empty line."""
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def _colored_lines(text: str, lines: list[str], path: Path, style: str) -> list[str]:
    colored = physical_lines(colorize_source(text, path, style))
    if len(colored) != len(lines):
        logger.debug("colourised line count mismatch for %s; using plain text", path)
        return lines
    return colored


def format_numbered_lines(
    lines: list[str],
    target_line: int,
    colored: list[str] | None = None,
    no_color: bool = False,
) -> str:
    """Format ``lines`` with numbering and a marked ``target_line`` (1-based)."""
    out: list[str] = []
    for idx, line in enumerate(lines):
        number = idx + 1
        prefix = f"{number:4d} | "
        if number == target_line:
            body = line if no_color else f"{TARGET_EMPHASIS}{line}{RESET}"
            out.append(TARGET_MARKER + prefix + body + "\n")
            continue
        body = colored[idx] if colored is not None else line
        out.append(PLAIN_GUTTER + prefix + body + "\n")
    return "".join(out)


def render_raw_file(
    path: str,
    target_line: int,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> str:
    """Read ``path`` and return its numbered, target-marked rendering.

    Raises ``FileOpenError`` when the file cannot be read.
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or str(exc)) from exc

    text = sanitize_terminal_text(decode_bytes(data))
    lines = physical_lines(text)
    colored = None if no_color else _colored_lines(text, lines, file_path, style)
    return format_numbered_lines(lines, target_line, colored=colored, no_color=no_color)
