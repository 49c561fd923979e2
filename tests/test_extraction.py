"""
Tests for the extraction orchestrator (perform_extraction / perform).
"""

import unittest

from pathment_scanner.core.pathment import Type
from pathment_scanner.extraction.orchestrator import ScanResult, perform, perform_extraction


def _types(pathments):
    return [p.type for p in pathments]


class TestPerformExtraction(unittest.TestCase):
    def test_duplicates_removed(self):
        result = perform_extraction("Visit https://google.com and https://google.com again")
        self.assertEqual(len(result.valid_pathments), 1)
        self.assertIs(result.valid_pathments[0].type, Type.URL_ADDRESS)

    def test_duplicates_ignore_case(self):
        result = perform_extraction("https://Example.com/A and https://example.com/a")
        self.assertEqual(len(result.valid_pathments), 1)

    def test_hostname_and_url_not_merged(self):
        result = perform_extraction("google.com and https://google.com")
        self.assertEqual(
            sorted(t.name for t in _types(result.valid_pathments)),
            ["HOSTNAME", "URL_ADDRESS"],
        )

    def test_sort_order(self):
        result = perform_extraction(
            "Ping 10.0.0.1, mail bob@example.com, see https://example.com"
        )
        self.assertEqual(
            _types(result.valid_pathments),
            [Type.URL_ADDRESS, Type.EMAIL, Type.IP_ADDRESS],
        )

    def test_trailing_punctuation_removed(self):
        result = perform_extraction("See https://example.com/page.")
        self.assertEqual(result.valid_pathments[0].address_for_display, "example.com/page")

    def test_paths_in_prose(self):
        result = perform_extraction(
            "Saved to C:\\Users\\a\\report.pdf, logs in /var/log/syslog.1 and ./build/out.o"
        )
        found = {(p.type, p.address_for_display) for p in result.valid_pathments}
        self.assertIn((Type.LOCAL_PATH, "C:\\Users\\a\\report.pdf"), found)
        self.assertIn((Type.LOCAL_PATH, "/var/log/syslog.1"), found)
        self.assertIn((Type.RELATIVE_PATH, "./build/out.o"), found)

    def test_unspecified_tokens(self):
        result = perform_extraction("Read notes.md and readme.txt first")
        self.assertEqual(result.valid_pathments, [])
        self.assertEqual(
            [p.address_for_display for p in result.unspecified_tokens],
            ["notes.md", "readme.txt"],
        )
        self.assertTrue(all(p.type is Type.UNSPECIFIED for p in result.unspecified_tokens))

    def test_blank_input(self):
        self.assertEqual(perform_extraction(""), ScanResult([], []))
        self.assertEqual(perform_extraction("   \n "), ScanResult([], []))
        self.assertEqual(perform_extraction(None), ScanResult([], []))

    def test_deterministic(self):
        text = (
            "Contact bob@example.com or alice@example.org. Docs: https://docs.example.com/a, "
            "www.example.net and ftp://files.example.com/pub. Server 192.168.0.10, "
            "share \\\\nas\\public\\list.xlsx and example.io"
        )
        first = perform_extraction(text)
        second = perform_extraction(text)
        self.assertEqual(
            [(p.type, p.address_for_display) for p in first.valid_pathments],
            [(p.type, p.address_for_display) for p in second.valid_pathments],
        )
        self.assertEqual(len(first.valid_pathments), 8)

    def test_perform_returns_valid_list(self):
        pathments = perform("mail bob@example.com")
        self.assertEqual(_types(pathments), [Type.EMAIL])

    def test_parenthesised_url(self):
        pathments = perform("(see https://example.com/a)")
        self.assertEqual(_types(pathments), [Type.URL_ADDRESS])
        self.assertEqual(pathments[0].address_for_uri, "https://example.com/a")

    def test_accepted_pathments_logged_by_category(self):
        text = "https://example.com a@example.com /etc/hosts.conf 10.0.0.1"
        with self.assertLogs("pathment-scanner", level="DEBUG") as cm:
            perform_extraction(text)
        output = "\n".join(cm.output)
        for tag in ("[URL]", "[EMAIL]", "[PATH]", "[HOST]"):
            self.assertIn(tag, output)


if __name__ == "__main__":
    unittest.main()
