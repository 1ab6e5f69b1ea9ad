"""Background execution of search and file-load commands.

Each command runs on its own daemon thread; its completion event lands on a
queue that the main loop drains between key reads. Nothing is cancelled, so
a reissued command of the same kind races the earlier one and the last
completion to arrive wins.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from queue import Empty, Queue

from ..commands import Command, FileLoadCommand, SearchCommand
from ..config import Settings
from ..errors import CommandError
from ..events import Event, FileLoaded, SearchCompleted
from ..preview import load_file
from ..search import run_search

logger = logging.getLogger(__name__)


class CommandRunner:
    """Run commands off the event loop and collect their completion events."""

    def __init__(
        self,
        settings: Settings,
        search: Callable[..., list] = run_search,
        load: Callable[..., str] = load_file,
    ) -> None:
        self._settings = settings
        self._search = search
        self._load = load
        self._completions: Queue[Event] = Queue()

    def _run_search(self, command: SearchCommand) -> SearchCompleted:
        try:
            matches = self._search(command.pattern, command.root, tool=self._settings.search_tool)
        except CommandError as exc:
            logger.warning("search %r in %s failed: %s", command.pattern, command.root, exc)
            return SearchCompleted(pattern=command.pattern, root=command.root, error=exc)
        logger.info("search %r in %s found %d matches", command.pattern, command.root, len(matches))
        return SearchCompleted(pattern=command.pattern, root=command.root, matches=tuple(matches))

    def _run_load(self, command: FileLoadCommand) -> FileLoaded:
        try:
            content = self._load(
                command.path,
                command.line_number,
                tool=self._settings.viewer_tool,
                style=self._settings.style,
                no_color=self._settings.no_color,
            )
        except CommandError as exc:
            logger.warning("loading %s:%s failed: %s", command.path, command.line_number, exc)
            return FileLoaded(path=command.path, line_number=command.line_number, error=exc)
        logger.info("loaded %s:%s", command.path, command.line_number)
        return FileLoaded(path=command.path, line_number=command.line_number, content=content)

    def execute(self, command: Command) -> Event:
        """Run ``command`` synchronously and return its completion event."""
        if isinstance(command, SearchCommand):
            return self._run_search(command)
        if isinstance(command, FileLoadCommand):
            return self._run_load(command)
        raise TypeError(f"unsupported command: {command!r}")

    def _worker(self, command: Command) -> None:
        try:
            completion = self.execute(command)
        except Exception as exc:
            logger.exception("command %r crashed", command)
            completion = _crash_completion(command, exc)
        self._completions.put(completion)

    def submit(self, command: Command) -> None:
        """Start ``command`` on a daemon thread and return immediately."""
        logger.info("dispatching %r", command)
        name = "lazyrg-search" if isinstance(command, SearchCommand) else "lazyrg-file-load"
        worker = threading.Thread(target=self._worker, args=(command,), name=name, daemon=True)
        worker.start()

    def drain_events(self) -> list[Event]:
        """Drain all completion events posted so far."""
        out: list[Event] = []
        while True:
            try:
                out.append(self._completions.get_nowait())
            except Empty:
                break
        return out


def _crash_completion(command: Command, exc: Exception) -> Event:
    error = CommandError(f"unexpected failure: {exc}")
    if isinstance(command, SearchCommand):
        return SearchCompleted(pattern=command.pattern, root=command.root, error=error)
    return FileLoaded(path=command.path, line_number=command.line_number, error=error)
