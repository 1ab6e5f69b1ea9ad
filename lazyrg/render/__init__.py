"""Rendering exports: frame composition and terminal frame writes."""

from __future__ import annotations

from .screen import INITIALIZING, TITLE, render_screen, spinner_frame, write_frame

__all__ = ["INITIALIZING", "TITLE", "render_screen", "spinner_frame", "write_frame"]
