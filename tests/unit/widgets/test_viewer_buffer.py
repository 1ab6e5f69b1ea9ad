from __future__ import annotations

import unittest

from lazyrg.widgets import ViewerBuffer


def _buffer(lines: int, height: int) -> ViewerBuffer:
    content = "\n".join(f"line {i}" for i in range(1, lines + 1)) + "\n"
    return ViewerBuffer().set_size(80, height).set_content(content)


class ViewerBufferTests(unittest.TestCase):
    def test_content_replacement_resets_scroll(self) -> None:
        buffer = _buffer(50, 10).handle_key("G")
        self.assertEqual(buffer.offset, 40)

        reloaded = buffer.set_content("x\ny\n")

        self.assertEqual(reloaded.offset, 0)
        self.assertEqual(reloaded.lines, ("x", "y"))

    def test_scroll_is_clamped_at_both_ends(self) -> None:
        buffer = _buffer(15, 10)

        self.assertEqual(buffer.handle_key("UP").offset, 0)
        self.assertEqual(buffer.handle_key("PGDN").handle_key("PGDN").offset, 5)
        self.assertEqual(buffer.handle_key("END").handle_key("j").offset, 5)

    def test_short_content_never_scrolls(self) -> None:
        buffer = _buffer(3, 10)

        self.assertEqual(buffer.max_offset, 0)
        self.assertEqual(buffer.handle_key("f").offset, 0)

    def test_line_and_half_page_moves(self) -> None:
        buffer = _buffer(100, 10)

        self.assertEqual(buffer.handle_key("DOWN").handle_key("j").offset, 2)
        self.assertEqual(buffer.handle_key("d").offset, 5)
        self.assertEqual(buffer.handle_key("d").handle_key("u").offset, 0)
        self.assertEqual(buffer.handle_key("f").handle_key("b").offset, 0)

    def test_visible_lines_window(self) -> None:
        buffer = _buffer(20, 3).handle_key("j")

        self.assertEqual(buffer.visible_lines(), ("line 2", "line 3", "line 4"))

    def test_shrinking_viewport_reclamps_offset(self) -> None:
        buffer = _buffer(20, 5).handle_key("G")

        self.assertEqual(buffer.set_size(80, 10).offset, 10)
