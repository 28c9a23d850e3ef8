"""Tests for the package logger setup."""

import logging
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ContentSearch.utils.log import configure_logging, log


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        for handler in list(log.handlers):
            handler.close()
        log.handlers.clear()

    def test_console_only_returns_no_path(self) -> None:
        self.assertIsNone(configure_logging(level="warning", action="contents"))
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.level, logging.WARNING)
        self.assertFalse(log.propagate)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(level="chatty")
        self.assertEqual(log.handlers[0].level, logging.INFO)

    def test_file_receives_debug_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = configure_logging(level="ERROR", action="suggest", log_to_file=True, log_dir=tmp)
            log.debug("compiled body")
            for handler in log.handlers:
                handler.flush()

            self.assertEqual(path.parent, Path(tmp) / "suggest")
            self.assertTrue(path.name.startswith("suggest_"))
            text = path.read_text(encoding="utf-8")
            self.assertIn("[DEBG] compiled body", text)

            for handler in list(log.handlers):
                handler.close()
            log.handlers.clear()

    def test_rerun_replaces_handlers(self) -> None:
        configure_logging(level="INFO")
        configure_logging(level="DEBUG")
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
