"""Raw-mode and alternate-screen lifecycle for the full-screen session."""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_ALT_SCREEN = b"\x1b[?1049h"
LEAVE_ALT_SCREEN = b"\x1b[?1049l"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"


class TerminalController:
    """Switch one tty into raw alternate-screen mode and back."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_ALT_SCREEN + HIDE_CURSOR)
        self._active = True

    def disable_tui_mode(self) -> None:
        """Restore the cooked tty and main screen; a no-op when not enabled."""
        if not self._active:
            return
        self._active = False
        try:
            os.write(self.stdout_fd, SHOW_CURSOR + LEAVE_ALT_SCREEN)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Hold TUI mode for the duration of the block, restoring on any exit."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()
