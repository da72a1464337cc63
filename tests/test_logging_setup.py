from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from gameshelf.logging_setup import setup_logging


class SetupLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger("gameshelf")
        self.saved_handlers = list(self.logger.handlers)
        self.logger.handlers = []

    def tearDown(self) -> None:
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers = self.saved_handlers

    def test_records_from_submodules_reach_the_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "logs" / "session.log"
            self.assertEqual(setup_logging(path, verbose=True), path)
            logging.getLogger("gameshelf.pipeline").debug("applied: append tab 'Retro'")
            for handler in self.logger.handlers:
                handler.flush()
            text = path.read_text(encoding="utf-8")
            self.assertIn("gameshelf.pipeline - DEBUG - applied: append tab 'Retro'", text)
            self.assertEqual(setup_logging(Path(tmp) / "other.log"), path)
            for handler in self.logger.handlers:
                handler.close()

    def test_unopenable_log_file_falls_back_to_null_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            self.assertIsNone(setup_logging(blocker / "session.log"))
        self.assertTrue(all(isinstance(h, logging.NullHandler) for h in self.logger.handlers))


if __name__ == "__main__":
    unittest.main()
