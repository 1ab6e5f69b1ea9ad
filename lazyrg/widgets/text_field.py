"""Single-line editable text field value type."""

from __future__ import annotations

from dataclasses import dataclass, replace


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a typed character rather than a named token."""
    return len(key) == 1 and key.isprintable()


@dataclass(frozen=True)
class TextField:
    """Immutable line editor with cursor and horizontal scroll.

    ``offset`` is the first visible character; it follows the cursor once
    the value grows past ``width`` columns.
    """

    value: str = ""
    cursor: int = 0
    offset: int = 0
    width: int = 80
    placeholder: str = ""

    def _moved(self, value: str, cursor: int) -> TextField:
        cursor = max(0, min(cursor, len(value)))
        visible = max(1, self.width)
        offset = self.offset
        if cursor < offset:
            offset = cursor
        elif cursor >= offset + visible:
            offset = cursor - visible + 1
        offset = max(0, min(offset, max(0, len(value) + 1 - visible)))
        return replace(self, value=value, cursor=cursor, offset=offset)

    def set_value(self, value: str) -> TextField:
        return self._moved(value, len(value))

    def resize(self, width: int) -> TextField:
        return replace(self, width=max(1, width))._moved(self.value, self.cursor)

    def visible_text(self) -> str:
        return self.value[self.offset : self.offset + max(1, self.width)]

    def handle_key(self, key: str) -> TextField:
        value = self.value
        cursor = self.cursor
        if key == "LEFT":
            return self._moved(value, cursor - 1)
        if key == "RIGHT":
            return self._moved(value, cursor + 1)
        if key in {"HOME", "CTRL_A"}:
            return self._moved(value, 0)
        if key in {"END", "CTRL_E"}:
            return self._moved(value, len(value))
        if key == "BACKSPACE":
            if cursor == 0:
                return self
            return self._moved(value[: cursor - 1] + value[cursor:], cursor - 1)
        if key in {"DELETE", "CTRL_D"}:
            return self._moved(value[:cursor] + value[cursor + 1 :], cursor)
        if key == "CTRL_U":
            return self._moved(value[cursor:], 0)
        if key == "CTRL_K":
            return self._moved(value[:cursor], cursor)
        if is_printable_key(key):
            return self._moved(value[:cursor] + key + value[cursor:], cursor + 1)
        return self
