"""Error taxonomy for search and file-preview commands.

Command errors never abort the session: the runner captures them into
completion events and the dispatcher downgrades them to error statuses.
``LogOpenError`` is the only fatal startup condition.
"""

from __future__ import annotations


class LazyRGError(Exception):
    """Base class for all lazyrg errors."""


class LogOpenError(LazyRGError):
    """Diagnostic log file could not be opened at startup."""


class CommandError(LazyRGError):
    """Failure of an asynchronous search or file-load command."""


class EmptyPatternError(CommandError):
    def __init__(self) -> None:
        super().__init__("empty search pattern")


class RootNotFoundError(CommandError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"directory not found: {path}")


class SearchToolError(CommandError):
    """Search tool exited abnormally; ``detail`` holds its raw output."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail.strip() or "search tool failed")


class InvalidLineNumberError(CommandError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid line number: {value}")


class FileOpenError(CommandError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ViewerToolError(CommandError):
    """Highlighting pager failed even after retrying without line marking."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail.strip() or "viewer tool failed")


__all__ = [
    "CommandError",
    "EmptyPatternError",
    "FileOpenError",
    "InvalidLineNumberError",
    "LazyRGError",
    "LogOpenError",
    "RootNotFoundError",
    "SearchToolError",
    "ViewerToolError",
]
