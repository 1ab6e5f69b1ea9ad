"""Command-line front door for lazyrg.

Opens the diagnostic log, loads preferences, and starts the full-screen
session. There are no subcommands or options.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_settings
from .diagnostics import close_log, open_log
from .errors import LogOpenError
from .runtime import run_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="lazyrg",
        description="Interactive terminal front-end for ripgrep with a highlighted file preview.",
    )


def main(argv: list[str] | None = None) -> None:
    """Run one session; exit status 1 when the log file cannot be opened."""
    build_parser().parse_args(argv)
    cwd = Path.cwd()
    settings = load_settings()

    try:
        handler = open_log(settings.log_path(cwd))
    except LogOpenError as exc:
        print(f"error opening log file: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        logger.info("Starting LazyRG")
        run_app(settings, cwd)
    finally:
        logger.info("Stopping LazyRG")
        close_log(handler)


if __name__ == "__main__":
    main()
