"""Session bootstrap: wire terminal, command runner, and initial state."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..config import Settings
from ..state import AppState, initial_state
from .loop import run_main_loop
from .runner import CommandRunner
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_app(settings: Settings, cwd: Path | None = None) -> AppState:
    """Run one full-screen session in the current terminal."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("lazyrg needs an interactive terminal.")

    working_dir = Path.cwd() if cwd is None else cwd
    terminal = TerminalController(stdin_fd, stdout_fd)
    runner = CommandRunner(settings)
    logger.info("session started in %s", working_dir)
    final_state = run_main_loop(initial_state(str(working_dir)), terminal, runner)
    logger.info("session ended")
    return final_state
