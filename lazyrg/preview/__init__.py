"""File preview exports: pager invocation plus the raw fallback renderer."""

from __future__ import annotations

from .pager import DEFAULT_VIEWER_TOOL, build_viewer_command, load_file, parse_line_number
from .raw import format_numbered_lines, physical_lines, render_raw_file

__all__ = [
    "DEFAULT_VIEWER_TOOL",
    "build_viewer_command",
    "format_numbered_lines",
    "load_file",
    "parse_line_number",
    "physical_lines",
    "render_raw_file",
]
