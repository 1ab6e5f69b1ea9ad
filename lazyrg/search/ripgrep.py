"""Ripgrep invocation and line-oriented output parsing.

The search tool runs in filename-prefixed, line-numbered, colourless mode and
its ``file:line:text`` records become ``MatchRecord`` values in output order.
Exit statuses are mapped onto the command error taxonomy here.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from ..errors import EmptyPatternError, RootNotFoundError, SearchToolError

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_TOOL = "rg"
MISSING_PATH_MARKER = "No such file or directory"


@dataclass(frozen=True)
class MatchRecord:
    file_name: str
    line_number: str  # textual, validated when the file is loaded
    content: str
    full_path: str

    def title(self) -> str:
        return f"{self.file_name}:{self.line_number}"

    def filter_value(self) -> str:
        return self.file_name + self.content


def build_search_command(pattern: str, root: str, tool: str = DEFAULT_SEARCH_TOOL) -> list[str]:
    """Return argv for one recursive, line-numbered search of ``root``."""
    return [
        tool,
        "--line-number",
        "--color",
        "never",
        "--no-heading",
        "--with-filename",
        pattern,
        root,
    ]


def parse_match_line(line: str) -> MatchRecord | None:
    """Parse one ``file:line:text`` record, or ``None`` when malformed.

    Only the first two colons split fields; the remainder is the line text
    even when it contains colons itself.
    """
    if not line.strip():
        return None
    parts = line.split(":", 2)
    if len(parts) < 3:
        return None
    file_name = parts[0].strip()
    return MatchRecord(
        file_name=file_name,
        line_number=parts[1].strip(),
        content=parts[2].strip(),
        full_path=file_name,
    )


def parse_search_output(output: str) -> list[MatchRecord]:
    """Parse tool output into records, silently dropping malformed lines."""
    records: list[MatchRecord] = []
    for line in output.splitlines():
        record = parse_match_line(line)
        if record is not None:
            records.append(record)
    return records


def run_search(pattern: str, root: str, tool: str = DEFAULT_SEARCH_TOOL) -> list[MatchRecord]:
    """Run the search tool synchronously and return parsed matches.

    Raises ``EmptyPatternError`` without spawning anything for an empty
    pattern. A nonzero exit with empty output is the tool's "no matches"
    convention and yields ``[]``; output naming a missing path raises
    ``RootNotFoundError``; any other nonzero exit raises ``SearchToolError``
    carrying the raw output.
    """
    if not pattern:
        raise EmptyPatternError()

    cmd = build_search_command(pattern, root, tool)
    logger.info("running search: %s", cmd)
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise SearchToolError(f"failed to run {tool}: {exc}") from exc

    output = proc.stdout or ""
    if proc.returncode != 0:
        if MISSING_PATH_MARKER in output:
            raise RootNotFoundError(root)
        if not output.strip():
            return []
        raise SearchToolError(output)

    return parse_search_output(output)
