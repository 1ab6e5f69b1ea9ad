"""Selectable, filterable list of search matches."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..search.ripgrep import MatchRecord
from .text_field import is_printable_key

LIST_HEADER_ROWS = 2  # title row + filter/count row


@dataclass(frozen=True)
class ResultList:
    """Immutable list state.

    ``cursor`` and ``start`` index into ``visible_items()``, i.e. the items
    that survive the current filter. Without a filter the original order is
    kept, duplicates included.
    """

    items: tuple[MatchRecord, ...] = ()
    cursor: int = 0
    start: int = 0
    width: int = 0
    height: int = 0
    filter_text: str = ""
    filter_editing: bool = False
    loading: bool = False

    def visible_items(self) -> tuple[MatchRecord, ...]:
        if not self.filter_text:
            return self.items
        needle = self.filter_text.casefold()
        return tuple(item for item in self.items if needle in item.filter_value().casefold())

    @property
    def row_capacity(self) -> int:
        return max(0, self.height - LIST_HEADER_ROWS)

    @property
    def selected_index(self) -> int | None:
        if not self.visible_items():
            return None
        return self.cursor

    def selected(self) -> MatchRecord | None:
        visible = self.visible_items()
        if not visible:
            return None
        return visible[self.cursor]

    def _with_cursor(self, cursor: int) -> ResultList:
        count = len(self.visible_items())
        cursor = max(0, min(cursor, count - 1)) if count else 0
        rows = max(1, self.row_capacity)
        start = self.start
        if cursor < start:
            start = cursor
        elif cursor >= start + rows:
            start = cursor - rows + 1
        start = max(0, min(start, max(0, count - rows)))
        return replace(self, cursor=cursor, start=start)

    def set_items(self, items: tuple[MatchRecord, ...] | list[MatchRecord]) -> ResultList:
        return replace(
            self,
            items=tuple(items),
            cursor=0,
            start=0,
            filter_text="",
            filter_editing=False,
            loading=False,
        )

    def set_size(self, width: int, height: int) -> ResultList:
        return replace(self, width=max(0, width), height=max(0, height))._with_cursor(self.cursor)

    def start_loading(self) -> ResultList:
        return replace(self, loading=True)

    def stop_loading(self) -> ResultList:
        return replace(self, loading=False)

    def _set_filter(self, text: str) -> ResultList:
        return replace(self, filter_text=text, cursor=0, start=0)

    def _handle_filter_key(self, key: str) -> ResultList:
        if key == "ENTER":
            return replace(self, filter_editing=False)
        if key == "ESC":
            return replace(self._set_filter(""), filter_editing=False)
        if key == "BACKSPACE":
            return self._set_filter(self.filter_text[:-1])
        if key == "CTRL_U":
            return self._set_filter("")
        if key == "UP":
            return self._with_cursor(self.cursor - 1)
        if key == "DOWN":
            return self._with_cursor(self.cursor + 1)
        if is_printable_key(key):
            return self._set_filter(self.filter_text + key)
        return self

    def handle_key(self, key: str) -> ResultList:
        current = self.stop_loading()
        if current.filter_editing:
            return current._handle_filter_key(key)
        page = max(1, current.row_capacity)
        if key == "/":
            return replace(current, filter_editing=True)
        if key in {"UP", "k"}:
            return current._with_cursor(current.cursor - 1)
        if key in {"DOWN", "j"}:
            return current._with_cursor(current.cursor + 1)
        if key in {"PGUP", "b"}:
            return current._with_cursor(current.cursor - page)
        if key in {"PGDN", "f"}:
            return current._with_cursor(current.cursor + page)
        if key in {"HOME", "g"}:
            return current._with_cursor(0)
        if key in {"END", "G"}:
            return current._with_cursor(len(current.visible_items()) - 1)
        return current
