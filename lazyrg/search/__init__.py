"""Search package exports: ripgrep invocation and match parsing."""

from __future__ import annotations

from .ripgrep import (
    DEFAULT_SEARCH_TOOL,
    MatchRecord,
    build_search_command,
    parse_match_line,
    parse_search_output,
    run_search,
)

__all__ = [
    "DEFAULT_SEARCH_TOOL",
    "MatchRecord",
    "build_search_command",
    "parse_match_line",
    "parse_search_output",
    "run_search",
]
