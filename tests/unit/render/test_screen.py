from __future__ import annotations

import unittest
from dataclasses import replace

from lazyrg.dispatcher import dispatch, replay
from lazyrg.errors import SearchToolError
from lazyrg.events import FileLoaded, KeyInput, SearchCompleted, ToggleHelp, WindowResize
from lazyrg.render import INITIALIZING, TITLE, render_screen
from lazyrg.render.ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width
from lazyrg.render.screen import STATUS_ERROR_STYLE
from lazyrg.search import MatchRecord
from lazyrg.state import View, initial_state


def _plain(rows: list[str]) -> list[str]:
    return [ANSI_ESCAPE_RE.sub("", row) for row in rows]


def _ready(width: int = 80, height: int = 30):
    return dispatch(initial_state("/work/dir"), WindowResize(width=width, height=height)).state


class RenderScreenTests(unittest.TestCase):
    def test_before_first_resize_shows_initializing(self) -> None:
        self.assertEqual(render_screen(initial_state("/tmp")), [INITIALIZING])

    def test_frame_fills_window_height_and_width(self) -> None:
        for help_expanded in (False, True):
            with self.subTest(help_expanded=help_expanded):
                state = replace(_ready(), help_expanded=help_expanded)
                rows = render_screen(state)
                self.assertEqual(len(rows), 30)
                self.assertTrue(all(display_width(row) <= 80 for row in rows))

    def test_search_view_shows_title_tabs_and_working_directory(self) -> None:
        text = "\n".join(_plain(render_screen(_ready())))

        self.assertIn(TITLE, text)
        self.assertIn("Search  ", text)
        self.assertIn("File View", text)
        self.assertIn("/work/dir", text)
        self.assertIn("Enter directory path", text)

    def test_results_view_lists_matches_with_selection_marker(self) -> None:
        records = (MatchRecord("a.go", "3", "// TODO fix", "a.go"), MatchRecord("b.go", "10", "later", "b.go"))
        state = dispatch(_ready(), SearchCompleted(pattern="TODO", root=".", matches=records)).state
        state = replace(state, active_view=View.RESULTS)

        rows = _plain(render_screen(state))

        self.assertTrue(any(row.startswith("│ a.go:3") for row in rows))
        self.assertTrue(any(row.startswith("  b.go:10") for row in rows))
        self.assertIn("Found 2 results", "\n".join(rows))

    def test_file_view_shows_viewer_window(self) -> None:
        content = "\n".join(f"row {i}" for i in range(100))
        state = dispatch(_ready(), FileLoaded(path="a", line_number="1", content=content)).state
        state, _ = replay(replace(state, active_view=View.FILE), [KeyInput("j")])

        rows = _plain(render_screen(state))

        self.assertEqual(rows[2], "row 1")

    def test_error_status_uses_error_style(self) -> None:
        state = dispatch(_ready(), SearchCompleted(pattern="x", root=".", error=SearchToolError("bad"))).state

        rows = render_screen(state)

        self.assertTrue(any(STATUS_ERROR_STYLE in row and "Error: bad" in row for row in rows))

    def test_expanded_help_lists_all_bindings(self) -> None:
        state = dispatch(_ready(), ToggleHelp()).state

        text = "\n".join(_plain(render_screen(state)))

        self.assertIn("shift+tab", text)
        self.assertIn("next tab", text)


class AnsiClipTests(unittest.TestCase):
    def test_clip_preserves_escapes_and_counts_wide_chars(self) -> None:
        self.assertEqual(clip_ansi_line("\x1b[31mabcdef\x1b[0m", 3), "\x1b[31mabc")
        self.assertEqual(clip_ansi_line("界界界", 5), "界界")
        self.assertEqual(display_width("\x1b[1m界a\x1b[0m"), 3)
