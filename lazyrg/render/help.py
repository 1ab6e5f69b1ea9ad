"""Key help rows shown under the status bar.

The short form is one row; the expanded form lists every binding.
"""

from __future__ import annotations

KEY = "\033[38;5;229m"
DIM = "\033[38;5;245m"
RESET = "\033[0m"

SHORT_HELP: tuple[tuple[str, str], ...] = (
    ("?", "toggle help"),
    ("ctrl+c/q", "quit"),
)

FULL_HELP: tuple[tuple[tuple[str, str], ...], ...] = (
    (("ctrl+f", "search"), ("ctrl+s", "search"), ("enter", "select")),
    (("esc", "back"), ("ctrl+t", "next tab"), ("ctrl+c/q", "quit")),
    (("tab", "next input"), ("shift+tab", "previous input"), ("?", "toggle help")),
)


def _format_bindings(bindings: tuple[tuple[str, str], ...]) -> str:
    separator = f" {DIM}•{RESET} "
    return separator.join(f"{KEY}{keys}{RESET} {DIM}{label}{RESET}" for keys, label in bindings)


def help_lines(expanded: bool) -> list[str]:
    if not expanded:
        return [_format_bindings(SHORT_HELP)]
    return [_format_bindings(row) for row in FULL_HELP]
