from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from lazyrg.diagnostics import LOGGER_NAME, close_log, open_log
from lazyrg.errors import LogOpenError


class DiagnosticLogTests(unittest.TestCase):
    def test_log_lines_are_timestamped_and_appended(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "lazyrg.log"
            path.write_text("earlier line\n", encoding="utf-8")

            handler = open_log(path)
            try:
                logging.getLogger(f"{LOGGER_NAME}.test").info("hello %s", "there")
            finally:
                close_log(handler)

            lines = path.read_text(encoding="utf-8").splitlines()

        self.assertEqual(lines[0], "earlier line")
        self.assertRegex(lines[1], r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} INFO lazyrg\.test: hello there$")

    def test_close_detaches_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            handler = open_log(Path(tmp) / "x.log")
            close_log(handler)

        self.assertNotIn(handler, logging.getLogger(LOGGER_NAME).handlers)

    def test_unopenable_path_raises_log_open_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(LogOpenError):
                open_log(Path(tmp) / "missing-dir" / "x.log")
