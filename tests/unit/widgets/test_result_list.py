from __future__ import annotations

import unittest

from lazyrg.search import MatchRecord
from lazyrg.widgets import ResultList


def _record(name: str, line: str, content: str) -> MatchRecord:
    return MatchRecord(file_name=name, line_number=line, content=content, full_path=name)


ITEMS = (
    _record("a.py", "1", "alpha"),
    _record("b.py", "2", "beta"),
    _record("c.go", "3", "gamma ALPHA"),
    _record("a.py", "1", "alpha"),
)


class ResultListSelectionTests(unittest.TestCase):
    def test_empty_list_has_no_selection(self) -> None:
        results = ResultList()

        self.assertIsNone(results.selected())
        self.assertIsNone(results.selected_index)
        self.assertIsNone(results.handle_key("DOWN").selected())

    def test_set_items_keeps_order_and_duplicates(self) -> None:
        results = ResultList().set_items(ITEMS)

        self.assertEqual(results.visible_items(), ITEMS)
        self.assertEqual(results.selected(), ITEMS[0])

    def test_cursor_moves_and_clamps(self) -> None:
        results = ResultList(height=10).set_items(ITEMS)

        results = results.handle_key("DOWN").handle_key("j")
        self.assertEqual(results.cursor, 2)
        results = results.handle_key("END").handle_key("DOWN")
        self.assertEqual(results.cursor, 3)
        results = results.handle_key("g").handle_key("UP")
        self.assertEqual(results.cursor, 0)

    def test_start_follows_cursor_within_row_capacity(self) -> None:
        results = ResultList().set_items(ITEMS).set_size(40, 4)  # two item rows

        results = results.handle_key("DOWN").handle_key("DOWN")

        self.assertEqual(results.row_capacity, 2)
        self.assertEqual(results.start, 1)

    def test_set_items_resets_cursor_and_filter(self) -> None:
        results = ResultList().set_items(ITEMS).handle_key("/").handle_key("b").handle_key("ENTER")

        replaced = results.set_items(ITEMS[:1])

        self.assertEqual(replaced.filter_text, "")
        self.assertEqual(replaced.cursor, 0)


class ResultListFilterTests(unittest.TestCase):
    def test_filter_matches_name_and_content_case_insensitively(self) -> None:
        results = ResultList().set_items(ITEMS).handle_key("/")
        for ch in "alpha":
            results = results.handle_key(ch)

        self.assertTrue(results.filter_editing)
        self.assertEqual(results.visible_items(), (ITEMS[0], ITEMS[2], ITEMS[3]))

    def test_filter_over_composite_key(self) -> None:
        results = ResultList().set_items(ITEMS).handle_key("/")
        for ch in "gobeta":
            results = results.handle_key(ch)
        self.assertEqual(results.visible_items(), ())

        results = ResultList().set_items(ITEMS).handle_key("/")
        for ch in "pybeta":
            results = results.handle_key(ch)
        self.assertEqual(results.visible_items(), (ITEMS[1],))

    def test_enter_applies_and_esc_cancels(self) -> None:
        results = ResultList().set_items(ITEMS).handle_key("/").handle_key("g")

        applied = results.handle_key("ENTER")
        self.assertFalse(applied.filter_editing)
        self.assertEqual(applied.selected(), ITEMS[2])

        cancelled = results.handle_key("ESC")
        self.assertFalse(cancelled.filter_editing)
        self.assertEqual(cancelled.visible_items(), ITEMS)

    def test_typing_while_filtering_does_not_navigate(self) -> None:
        results = ResultList().set_items(ITEMS).handle_key("/").handle_key("j")

        self.assertEqual(results.filter_text, "j")

    def test_key_clears_loading_indicator(self) -> None:
        results = ResultList().set_items(ITEMS).start_loading()

        self.assertTrue(results.loading)
        self.assertFalse(results.handle_key("DOWN").loading)
