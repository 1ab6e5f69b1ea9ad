"""Main interactive event loop.

One event at a time enters the dispatcher: a resize, a drained command
completion, or a decoded key. The loop is the only place that performs the
side effects a transition asks for (starting commands, writing frames).
"""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass
from os import terminal_size

from ..dispatcher import dispatch
from ..events import Event, WindowResize
from ..input import key_to_event, read_key
from ..render import render_screen, write_frame
from ..render.screen import SPINNER_FRAME_SECONDS
from ..state import AppState, View
from .runner import CommandRunner
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_timeout_ms: int = 120
    spinner_frame_seconds: float = SPINNER_FRAME_SECONDS


def _terminal_size() -> terminal_size:
    return shutil.get_terminal_size((80, 24))


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    runner: CommandRunner,
    timing: RuntimeLoopTiming | None = None,
    get_terminal_size: Callable[[], terminal_size] = _terminal_size,
    read_key_fn: Callable[..., str] = read_key,
) -> AppState:
    """Run until a quit transition and return the final state."""
    timing = timing or RuntimeLoopTiming()
    last_size: tuple[int, int] | None = None
    dirty = True
    spinner_frame = -1

    def apply(event: Event) -> bool:
        nonlocal state, dirty
        transition = dispatch(state, event)
        if transition.state is not state:
            dirty = True
        state = transition.state
        for command in transition.commands:
            runner.submit(command)
        return transition.quit

    with terminal.raw_mode():
        while True:
            term = get_terminal_size()
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                apply(WindowResize(width=size[0], height=size[1]))

            for completion in runner.drain_events():
                if apply(completion):
                    return state

            now = time.monotonic()
            if state.active_view is View.RESULTS and state.results.loading:
                frame = int(now / timing.spinner_frame_seconds)
                if frame != spinner_frame:
                    spinner_frame = frame
                    dirty = True

            if dirty:
                write_frame(render_screen(state, now), terminal.stdout_fd)
                dirty = False

            try:
                key = read_key_fn(terminal.stdin_fd, timeout_ms=timing.key_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            if apply(key_to_event(key, state)):
                logger.info("quit requested")
                return state
