"""Compose full-screen frames from application state.

``render_screen`` is a pure function returning one string per terminal row;
``write_frame`` pushes a composed frame to the terminal.
"""

from __future__ import annotations

import os

from ..state import TAB_LABELS, TAB_ORDER, AppState, Focus, Severity, View
from ..widgets import ResultList, TextField, ViewerBuffer
from .ansi import clip_ansi_line, pad_ansi_line
from .help import help_lines

TITLE = "LazyRG - Interactive Ripgrep TUI"
INITIALIZING = "Initializing..."
SPINNER_FRAMES: tuple[str, ...] = ("|", "/", "-", "\\")
SPINNER_FRAME_SECONDS = 0.12

RESET = "\033[0m"
TITLE_STYLE = "\033[1;97;48;5;99m"
ACTIVE_TAB_STYLE = "\033[1;97;4m"
INACTIVE_TAB_STYLE = "\033[38;5;240m"
STATUS_STYLE = "\033[97;48;5;237m"
STATUS_ERROR_STYLE = "\033[1;97;48;5;124m"
LABEL_STYLE = "\033[1m"
PROMPT_STYLE = "\033[1;38;5;84m"
INPUT_TEXT_STYLE = "\033[38;5;99m"
PLACEHOLDER_STYLE = "\033[38;5;240m"
CURSOR_STYLE = "\033[7m"
LIST_TITLE_STYLE = "\033[1;38;5;84m"
SELECTED_STYLE = "\033[1;38;5;99m"
DIM_STYLE = "\033[38;5;245m"

PROMPT = "❯ "
DIRECTORY_ICON = "📂"


def spinner_frame(now: float) -> str:
    return SPINNER_FRAMES[int(now / SPINNER_FRAME_SECONDS) % len(SPINNER_FRAMES)]


def _tabs_row(active: View) -> str:
    parts: list[str] = []
    for view in TAB_ORDER:
        style = ACTIVE_TAB_STYLE if view is active else INACTIVE_TAB_STYLE
        parts.append(f"{style} {TAB_LABELS[view]} {RESET}")
    return "  ".join(parts)


def render_text_field(field: TextField, focused: bool) -> str:
    if not field.value and not focused:
        return f"{PROMPT_STYLE}{PROMPT}{RESET}{PLACEHOLDER_STYLE}{field.placeholder}{RESET}"
    visible = field.visible_text()
    if not focused:
        return f"{PROMPT_STYLE}{PROMPT}{RESET}{INPUT_TEXT_STYLE}{visible}{RESET}"
    cursor_col = field.cursor - field.offset
    before = visible[:cursor_col]
    under = visible[cursor_col : cursor_col + 1] or " "
    after = visible[cursor_col + 1 :]
    if not field.value:
        return (
            f"{PROMPT_STYLE}{PROMPT}{RESET}{CURSOR_STYLE} {RESET}"
            f"{PLACEHOLDER_STYLE}{field.placeholder}{RESET}"
        )
    return (
        f"{PROMPT_STYLE}{PROMPT}{RESET}{INPUT_TEXT_STYLE}{before}{RESET}"
        f"{CURSOR_STYLE}{under}{RESET}{INPUT_TEXT_STYLE}{after}{RESET}"
    )


def _search_body(state: AppState) -> list[str]:
    return [
        "",
        f"{LABEL_STYLE}Search Pattern{RESET}",
        render_text_field(state.pattern_input, state.focus is Focus.PATTERN),
        "",
        f"{LABEL_STYLE}Directory Path{RESET}",
        render_text_field(state.directory_input, state.focus is Focus.DIRECTORY),
        "",
        f"{DIRECTORY_ICON} {DIM_STYLE}{state.cwd}{RESET}",
    ]


def _results_body(results: ResultList, now: float) -> list[str]:
    title = f"{LIST_TITLE_STYLE}Search Results{RESET}"
    if results.loading:
        title += f" {spinner_frame(now)}"
    visible = results.visible_items()
    if results.filter_editing:
        info = f"Filter: {results.filter_text}{CURSOR_STYLE} {RESET}"
    elif results.filter_text:
        info = f"{DIM_STYLE}“{results.filter_text}” {len(visible)} of {len(results.items)} items{RESET}"
    else:
        info = f"{DIM_STYLE}{len(visible)} items{RESET}"
    rows = [title, info]
    if not visible:
        rows.append(f"{DIM_STYLE}No items.{RESET}")
        return rows
    end = results.start + results.row_capacity
    for idx in range(results.start, min(end, len(visible))):
        record = visible[idx]
        if idx == results.cursor:
            rows.append(f"{SELECTED_STYLE}│ {record.title()}{RESET}  {record.content}")
        else:
            rows.append(f"  {record.title()}  {DIM_STYLE}{record.content}{RESET}")
    return rows


def _file_body(viewer: ViewerBuffer) -> list[str]:
    return [clip_ansi_line(line, viewer.width) if viewer.width else line for line in viewer.visible_lines()]


def render_screen(state: AppState, now: float = 0.0) -> list[str]:
    """Return exactly ``state.height`` rows, each clipped to ``state.width``."""
    if not state.ready:
        return [INITIALIZING]

    width = max(1, state.width)
    footer = help_lines(state.help_expanded)
    status_style = STATUS_ERROR_STYLE if state.status_severity is Severity.ERROR else STATUS_STYLE
    status = f"{status_style}{pad_ansi_line(' ' + state.status_message, width)}{RESET}"
    header = [
        f"{TITLE_STYLE}{pad_ansi_line(' ' + TITLE, width)}{RESET}",
        _tabs_row(state.active_view),
    ]

    if state.active_view is View.SEARCH:
        body = _search_body(state)
    elif state.active_view is View.RESULTS:
        body = _results_body(state.results, now)
    else:
        body = _file_body(state.viewer)

    body_rows = max(0, state.height - len(header) - 1 - len(footer))
    body = body[:body_rows] + [""] * max(0, body_rows - len(body))
    rows = header + body + [status] + footer
    return [clip_ansi_line(row, width) for row in rows[: max(1, state.height)]]


def write_frame(rows: list[str], stdout_fd: int) -> None:
    out = ["\033[H\033[J"]
    for idx, row in enumerate(rows):
        if idx:
            out.append("\r\n")
        out.append(row)
        if "\033" in row:
            out.append(RESET)
    os.write(stdout_fd, "".join(out).encode("utf-8", errors="replace"))
