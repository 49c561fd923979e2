"""
Tests for pasted-HTML extraction.
"""

import unittest

from pathment_scanner.core.pathment import Type
from pathment_scanner.extraction.html_parser import (
    collect_html_addresses,
    extract_from_html,
    html_to_text,
)
from pathment_scanner.extraction.orchestrator import ScanResult


class TestCollectHtmlAddresses(unittest.TestCase):
    def test_document_order(self):
        html = (
            '<p><a href="https://example.com/docs">Docs</a>'
            '<img src="/static/logo.png"></p>'
        )
        self.assertEqual(
            collect_html_addresses(html), ["https://example.com/docs", "/static/logo.png"]
        )

    def test_meta_refresh(self):
        html = '<head><meta http-equiv="refresh" content="0; url=https://example.org/new"></head>'
        self.assertEqual(collect_html_addresses(html), ["https://example.org/new"])

    def test_script_and_fragment_links_skipped(self):
        html = '<a href="javascript:void(0)">x</a><a href="#top">y</a><img src="data:image/png;base64,AA">'
        self.assertEqual(collect_html_addresses(html), [])


class TestHtmlToText(unittest.TestCase):
    def test_scripts_removed(self):
        text = html_to_text('<script>var u = "https://t.example.com";</script><p>hi</p>')
        self.assertIn("hi", text)
        self.assertNotIn("t.example.com", text)


class TestExtractFromHtml(unittest.TestCase):
    def test_links_and_text(self):
        html = (
            '<html><body><a href="https://example.com/docs">Docs</a>'
            "<p>Mail bob@example.com</p></body></html>"
        )
        types = [p.type for p in extract_from_html(html).valid_pathments]
        self.assertEqual(types, [Type.URL_ADDRESS, Type.EMAIL])

    def test_relative_src_is_a_path(self):
        result = extract_from_html('<img src="/static/logo.png">')
        self.assertEqual(
            [(p.type, p.address_for_display) for p in result.valid_pathments],
            [(Type.LOCAL_PATH, "/static/logo.png")],
        )

    def test_plain_text_input(self):
        result = extract_from_html("see https://example.com")
        self.assertEqual([p.type for p in result.valid_pathments], [Type.URL_ADDRESS])

    def test_link_text_and_href_deduplicated(self):
        html = '<a href="https://example.com">https://example.com</a>'
        self.assertEqual(len(extract_from_html(html).valid_pathments), 1)

    def test_blank(self):
        self.assertEqual(extract_from_html(""), ScanResult([], []))
        self.assertEqual(extract_from_html(None), ScanResult([], []))


if __name__ == "__main__":
    unittest.main()
