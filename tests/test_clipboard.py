"""
Tests for clipboard routing.
"""

import unittest

from pathment_scanner.clipboard import analyze_clipboard_text, is_block_text
from pathment_scanner.core.pathment import Type


class TestAnalyzeClipboardText(unittest.TestCase):
    def test_short_text_is_one_entity(self):
        result = analyze_clipboard_text("https://example.com")
        self.assertEqual([p.type for p in result], [Type.URL_ADDRESS])

    def test_short_unclassified_text_is_kept(self):
        result = analyze_clipboard_text("hello")
        self.assertEqual(len(result), 1)
        self.assertIs(result[0].type, Type.UNSPECIFIED)

    def test_multi_line_is_scanned(self):
        result = analyze_clipboard_text("a.com\nbob@example.com")
        self.assertEqual([p.type for p in result], [Type.EMAIL, Type.HOSTNAME])

    def test_long_line_is_scanned(self):
        text = "x " * 100 + "https://example.com"
        self.assertGreater(len(text), 200)
        result = analyze_clipboard_text(text)
        self.assertEqual([p.type for p in result], [Type.URL_ADDRESS])

    def test_threshold(self):
        self.assertFalse(is_block_text("a" * 200))
        self.assertTrue(is_block_text("a" * 201))
        self.assertEqual(len(analyze_clipboard_text("a" * 200)), 1)

    def test_blank(self):
        self.assertEqual(analyze_clipboard_text(""), [])
        self.assertEqual(analyze_clipboard_text("  \n "), [])
        self.assertEqual(analyze_clipboard_text(None), [])


if __name__ == "__main__":
    unittest.main()
