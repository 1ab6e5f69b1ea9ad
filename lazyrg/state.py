"""Application state value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .widgets import ResultList, TextField, ViewerBuffer

WELCOME_MESSAGE = "Welcome to LazyRG! Press Ctrl+F to search"
PATTERN_PLACEHOLDER = "Enter search pattern..."
DIRECTORY_PLACEHOLDER = "Enter directory path (leave empty for current directory)..."


class View(Enum):
    SEARCH = "search"
    RESULTS = "results"
    FILE = "file"


TAB_ORDER: tuple[View, ...] = (View.SEARCH, View.RESULTS, View.FILE)
TAB_LABELS: dict[View, str] = {
    View.SEARCH: "Search",
    View.RESULTS: "Results",
    View.FILE: "File View",
}


class Focus(Enum):
    """Which search input owns typing; exactly one at a time."""

    PATTERN = "pattern"
    DIRECTORY = "directory"


class Severity(Enum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class AppState:
    cwd: str
    active_view: View = View.SEARCH
    focus: Focus = Focus.PATTERN
    pattern_input: TextField = field(default_factory=lambda: TextField(placeholder=PATTERN_PLACEHOLDER))
    directory_input: TextField = field(default_factory=lambda: TextField(placeholder=DIRECTORY_PLACEHOLDER))
    current_pattern: str = ""
    results: ResultList = field(default_factory=ResultList)
    viewer: ViewerBuffer = field(default_factory=ViewerBuffer)
    viewing_path: str = ""
    status_message: str = WELCOME_MESSAGE
    status_severity: Severity = Severity.INFO
    help_expanded: bool = False
    width: int = 0
    height: int = 0
    ready: bool = False

    @property
    def search_pattern(self) -> str:
        return self.pattern_input.value

    @property
    def directory_path(self) -> str:
        return self.directory_input.value

    def search_root(self) -> str:
        """Directory to search: the typed path, else the working directory."""
        return self.directory_path or self.cwd


def initial_state(cwd: str) -> AppState:
    return AppState(cwd=cwd)
