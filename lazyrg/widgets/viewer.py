"""Scrollable read-only text buffer for the file preview."""

from __future__ import annotations

from dataclasses import dataclass, replace

_SCROLL_KEYS: dict[str, str] = {
    "UP": "line_up",
    "k": "line_up",
    "DOWN": "line_down",
    "j": "line_down",
    "PGUP": "page_up",
    "b": "page_up",
    "PGDN": "page_down",
    "f": "page_down",
    " ": "page_down",
    "u": "half_up",
    "CTRL_U": "half_up",
    "d": "half_down",
    "CTRL_D": "half_down",
    "HOME": "top",
    "g": "top",
    "END": "bottom",
    "G": "bottom",
}


def split_content(content: str) -> tuple[str, ...]:
    lines = content.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return tuple(lines)


@dataclass(frozen=True)
class ViewerBuffer:
    """Already-rendered content plus a scroll offset clamped to the viewport."""

    lines: tuple[str, ...] = ()
    offset: int = 0
    width: int = 0
    height: int = 0

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    def scroll_to(self, offset: int) -> ViewerBuffer:
        return replace(self, offset=max(0, min(offset, self.max_offset)))

    def scroll_by(self, delta: int) -> ViewerBuffer:
        return self.scroll_to(self.offset + delta)

    def goto_top(self) -> ViewerBuffer:
        return replace(self, offset=0)

    def set_content(self, content: str) -> ViewerBuffer:
        return replace(self, lines=split_content(content), offset=0)

    def set_size(self, width: int, height: int) -> ViewerBuffer:
        resized = replace(self, width=max(0, width), height=max(0, height))
        return resized.scroll_to(resized.offset)

    def visible_lines(self) -> tuple[str, ...]:
        return self.lines[self.offset : self.offset + self.height]

    def handle_key(self, key: str) -> ViewerBuffer:
        action = _SCROLL_KEYS.get(key)
        page = max(1, self.height)
        if action == "line_up":
            return self.scroll_by(-1)
        if action == "line_down":
            return self.scroll_by(1)
        if action == "page_up":
            return self.scroll_by(-page)
        if action == "page_down":
            return self.scroll_by(page)
        if action == "half_up":
            return self.scroll_by(-max(1, page // 2))
        if action == "half_down":
            return self.scroll_by(max(1, page // 2))
        if action == "top":
            return self.scroll_to(0)
        if action == "bottom":
            return self.scroll_to(self.max_offset)
        return self
