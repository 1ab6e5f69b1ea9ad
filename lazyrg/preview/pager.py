"""File preview through the external highlighting pager.

The pager renders the file with the target line marked. When the binary is
absent the raw renderer takes over; when it fails for any other reason it is
retried once without line marking before giving up.
"""

from __future__ import annotations

import logging
import subprocess

from ..errors import InvalidLineNumberError, ViewerToolError
from .highlight import DEFAULT_STYLE
from .raw import render_raw_file

logger = logging.getLogger(__name__)

DEFAULT_VIEWER_TOOL = "bat"


def parse_line_number(value: str) -> int:
    """Parse a match line number, raising ``InvalidLineNumberError`` unless positive."""
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise InvalidLineNumberError(value) from exc
    if parsed <= 0:
        raise InvalidLineNumberError(value)
    return parsed


def build_viewer_command(path: str, line_number: int | None, tool: str = DEFAULT_VIEWER_TOOL) -> list[str]:
    cmd = [tool, "--color=always", "--style=full"]
    if line_number is not None:
        cmd.extend(["--highlight-line", str(line_number)])
    cmd.append(path)
    return cmd


def _run_viewer(cmd: list[str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )


def load_file(
    path: str,
    line_number: str,
    tool: str = DEFAULT_VIEWER_TOOL,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> str:
    """Return rendered preview content for ``path`` with ``line_number`` marked.

    Raises ``InvalidLineNumberError`` before spawning anything, ``FileOpenError``
    when the raw fallback cannot read the file, and ``ViewerToolError`` when
    the pager fails both with and without line marking.
    """
    target = parse_line_number(line_number)

    try:
        proc = _run_viewer(build_viewer_command(path, target, tool))
    except FileNotFoundError:
        logger.info("%s not found; rendering %s with raw fallback", tool, path)
        return render_raw_file(path, target, style=style, no_color=no_color)
    except OSError as exc:
        logger.warning("%s could not start for %s: %s", tool, path, exc)
    else:
        if proc.returncode == 0:
            return proc.stdout or ""
        logger.warning(
            "%s exited %d for %s; retrying without line marking",
            tool,
            proc.returncode,
            path,
        )

    try:
        retry = _run_viewer(build_viewer_command(path, None, tool))
    except OSError as exc:
        raise ViewerToolError(f"failed to run {tool}: {exc}") from exc
    if retry.returncode != 0:
        raise ViewerToolError(retry.stdout or f"{tool} failed with exit code {retry.returncode}")
    return retry.stdout or ""
