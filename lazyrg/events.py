"""Events consumed by the dispatcher.

User actions carry no payload beyond what the action needs; completions
carry either a result or the ``CommandError`` that replaced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import CommandError
from .search.ripgrep import MatchRecord


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ToggleHelp:
    pass


@dataclass(frozen=True)
class NextTab:
    pass


@dataclass(frozen=True)
class FocusSearch:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class NextField:
    pass


@dataclass(frozen=True)
class PrevField:
    pass


@dataclass(frozen=True)
class WindowResize:
    width: int
    height: int


@dataclass(frozen=True)
class KeyInput:
    """A key not bound to an action; routed to the active view's widget."""

    key: str


@dataclass(frozen=True)
class SearchCompleted:
    pattern: str
    root: str
    matches: tuple[MatchRecord, ...] = ()
    error: CommandError | None = None


@dataclass(frozen=True)
class FileLoaded:
    path: str
    line_number: str
    content: str = ""
    error: CommandError | None = None


Event = Union[
    Quit,
    ToggleHelp,
    NextTab,
    FocusSearch,
    Back,
    Confirm,
    NextField,
    PrevField,
    WindowResize,
    KeyInput,
    SearchCompleted,
    FileLoaded,
]

__all__ = [
    "Back",
    "Confirm",
    "Event",
    "FileLoaded",
    "FocusSearch",
    "KeyInput",
    "NextField",
    "NextTab",
    "PrevField",
    "Quit",
    "SearchCompleted",
    "ToggleHelp",
    "WindowResize",
]
