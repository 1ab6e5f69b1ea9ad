"""Asynchronous command descriptors emitted by the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SearchCommand:
    pattern: str
    root: str


@dataclass(frozen=True)
class FileLoadCommand:
    path: str
    line_number: str


Command = Union[SearchCommand, FileLoadCommand]

__all__ = ["Command", "FileLoadCommand", "SearchCommand"]
