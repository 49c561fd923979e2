"""
Tests for logging setup and category highlighting.
"""

import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from pathment_scanner.utils.log import (
    _CIFormatter,
    _apply_category_styles,
    ci_enabled,
    log,
    setup_logging,
)


class TestSetupLogging(unittest.TestCase):
    def tearDown(self):
        for handler in list(log.handlers):
            handler.close()
        log.handlers.clear()

    def test_console_only(self):
        setup_logging()
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.level, logging.INFO)
        self.assertFalse(log.propagate)

    def test_debug(self):
        setup_logging(debug=True)
        self.assertEqual(log.level, logging.DEBUG)
        self.assertEqual(log.handlers[0].level, logging.DEBUG)

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging()
        setup_logging()
        self.assertEqual(len(log.handlers), 1)

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sub", "scan.log")
            setup_logging(log_file=path)
            self.assertEqual(len(log.handlers), 2)
            self.assertEqual(log.level, logging.DEBUG)
            log.debug("[SCAN] detail line")
            for handler in log.handlers:
                handler.flush()
            with open(path, encoding="utf-8") as f:
                self.assertIn("[SCAN] detail line", f.read())
            self.tearDown()

    def test_ci_formatter(self):
        with patch.dict(os.environ, {"GITHUB_ACTIONS": "true"}):
            self.assertTrue(ci_enabled())
            setup_logging()
        formatter = log.handlers[0].formatter
        self.assertIsInstance(formatter, _CIFormatter)
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
        self.assertTrue(formatter.format(record).startswith("::warning::"))


class TestCategoryStyles(unittest.TestCase):
    def test_known_tag_coloured(self):
        self.assertIn("\033[1;34m[URL]\033[0m", _apply_category_styles("[URL] https://a.com"))

    def test_unknown_tag_untouched(self):
        self.assertEqual(_apply_category_styles("[FOO] x"), "[FOO] x")


if __name__ == "__main__":
    unittest.main()
