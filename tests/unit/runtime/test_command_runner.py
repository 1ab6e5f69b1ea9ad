"""Tests for background command execution and completion delivery."""

from __future__ import annotations

import threading
import time
import unittest

from lazyrg.commands import FileLoadCommand, SearchCommand
from lazyrg.config import Settings
from lazyrg.errors import CommandError, EmptyPatternError, InvalidLineNumberError
from lazyrg.events import FileLoaded, SearchCompleted
from lazyrg.runtime.runner import CommandRunner
from lazyrg.search import MatchRecord

RECORD = MatchRecord("a.py", "1", "x", "a.py")


def _drain_until(runner: CommandRunner, count: int, timeout: float = 2.0) -> list:
    events: list = []
    deadline = time.monotonic() + timeout
    while len(events) < count and time.monotonic() < deadline:
        events.extend(runner.drain_events())
        time.sleep(0.01)
    return events


class ExecuteTests(unittest.TestCase):
    def test_search_success_becomes_completion_with_matches(self) -> None:
        calls = []

        def fake_search(pattern, root, tool):
            calls.append((pattern, root, tool))
            return [RECORD]

        runner = CommandRunner(Settings(search_tool="rg2"), search=fake_search)

        event = runner.execute(SearchCommand(pattern="x", root="."))

        self.assertEqual(event, SearchCompleted(pattern="x", root=".", matches=(RECORD,)))
        self.assertEqual(calls, [("x", ".", "rg2")])

    def test_search_error_becomes_completion_with_error(self) -> None:
        def fake_search(pattern, root, tool):
            raise EmptyPatternError()

        event = CommandRunner(Settings(), search=fake_search).execute(SearchCommand(pattern="", root="."))

        self.assertIsInstance(event, SearchCompleted)
        self.assertIsInstance(event.error, EmptyPatternError)
        self.assertEqual(event.matches, ())

    def test_load_passes_viewer_settings(self) -> None:
        seen = {}

        def fake_load(path, line_number, **kwargs):
            seen.update(kwargs, path=path, line_number=line_number)
            return "content"

        settings = Settings(viewer_tool="batcat", style="native", no_color=True)
        event = CommandRunner(settings, load=fake_load).execute(FileLoadCommand(path="a.py", line_number="4"))

        self.assertEqual(event, FileLoaded(path="a.py", line_number="4", content="content"))
        self.assertEqual(
            seen,
            {"path": "a.py", "line_number": "4", "tool": "batcat", "style": "native", "no_color": True},
        )

    def test_load_error_becomes_completion_with_error(self) -> None:
        def fake_load(path, line_number, **_kwargs):
            raise InvalidLineNumberError(line_number)

        event = CommandRunner(Settings(), load=fake_load).execute(FileLoadCommand(path="a.py", line_number="z"))

        self.assertIsInstance(event.error, InvalidLineNumberError)


class SubmitTests(unittest.TestCase):
    def test_submit_does_not_block_and_posts_completion(self) -> None:
        release = threading.Event()

        def slow_search(pattern, root, tool):
            release.wait(2.0)
            return [RECORD]

        runner = CommandRunner(Settings(), search=slow_search)
        started = time.monotonic()
        runner.submit(SearchCommand(pattern="x", root="."))
        self.assertLess(time.monotonic() - started, 0.5)
        self.assertEqual(runner.drain_events(), [])

        release.set()
        events = _drain_until(runner, 1)

        self.assertEqual(events, [SearchCompleted(pattern="x", root=".", matches=(RECORD,))])

    def test_unexpected_crash_still_posts_completion(self) -> None:
        def broken_load(path, line_number, **_kwargs):
            raise RuntimeError("kaboom")

        runner = CommandRunner(Settings(), load=broken_load)
        runner.submit(FileLoadCommand(path="a.py", line_number="1"))

        events = _drain_until(runner, 1)

        self.assertEqual(len(events), 1)
        self.assertIsInstance(events[0].error, CommandError)
        self.assertIn("kaboom", str(events[0].error))

    def test_two_searches_both_complete(self) -> None:
        runner = CommandRunner(Settings(), search=lambda pattern, root, tool: [])
        runner.submit(SearchCommand(pattern="a", root="."))
        runner.submit(SearchCommand(pattern="b", root="."))

        events = _drain_until(runner, 2)

        self.assertEqual(sorted(event.pattern for event in events), ["a", "b"])
