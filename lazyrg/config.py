"""Read-only JSON preferences.

Selects external tool binaries, the fallback colour style, and the log file.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .preview.highlight import DEFAULT_STYLE
from .preview.pager import DEFAULT_VIEWER_TOOL
from .search.ripgrep import DEFAULT_SEARCH_TOOL

APP_NAME = "lazyrg"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_FILE = "lazyrg.log"


@dataclass(frozen=True)
class Settings:
    search_tool: str = DEFAULT_SEARCH_TOOL
    viewer_tool: str = DEFAULT_VIEWER_TOOL
    style: str = DEFAULT_STYLE
    no_color: bool = False
    log_file: str = DEFAULT_LOG_FILE

    def log_path(self, cwd: Path) -> Path:
        """Resolve the log file, relative paths against ``cwd``."""
        path = Path(self.log_file).expanduser()
        return path if path.is_absolute() else cwd / path


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _string_value(data: dict[str, object], key: str, default: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        return default
    stripped = value.strip()
    return stripped if stripped else default


def load_settings(path: Path | None = None) -> Settings:
    """Build ``Settings`` from config, keeping defaults for invalid values."""
    data = load_config(path)
    no_color = data.get("no_color")
    return Settings(
        search_tool=_string_value(data, "search_tool", DEFAULT_SEARCH_TOOL),
        viewer_tool=_string_value(data, "viewer_tool", DEFAULT_VIEWER_TOOL),
        style=_string_value(data, "style", DEFAULT_STYLE),
        no_color=no_color if isinstance(no_color, bool) else False,
        log_file=_string_value(data, "log_file", DEFAULT_LOG_FILE),
    )
