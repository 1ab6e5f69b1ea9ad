"""Leaf widget value types: text fields, result list, file viewer."""

from __future__ import annotations

from .result_list import LIST_HEADER_ROWS, ResultList
from .text_field import TextField, is_printable_key
from .viewer import ViewerBuffer, split_content

__all__ = [
    "LIST_HEADER_ROWS",
    "ResultList",
    "TextField",
    "ViewerBuffer",
    "is_printable_key",
    "split_content",
]
