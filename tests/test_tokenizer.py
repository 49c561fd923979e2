"""
Tests for the master tokenizer and the candidate cleaner.
"""

import unittest

from pathment_scanner.extraction.tokenizer import (
    MATCHERS,
    clean_candidate,
    iter_candidates,
    tokenize,
)


def _pairs(text):
    return [(t.matcher, t.text) for t in tokenize(text)]


class TestTokenize(unittest.TestCase):
    def test_matcher_priority_order(self):
        self.assertEqual(
            [m.name for m in MATCHERS],
            ["url", "email", "windows_path", "www", "unix_path", "ip", "hostname"],
        )

    def test_url_and_email(self):
        self.assertEqual(
            _pairs("see https://example.com/a and bob@example.com"),
            [("url", "https://example.com/a"), ("email", "bob@example.com")],
        )

    def test_url_not_split_into_hostname(self):
        self.assertEqual(_pairs("https://google.com"), [("url", "https://google.com")])

    def test_ip_inside_url_not_repeated(self):
        self.assertEqual(
            _pairs("http://192.168.1.1:8080/admin"),
            [("url", "http://192.168.1.1:8080/admin")],
        )

    def test_windows_path(self):
        self.assertEqual(
            _pairs("Open C:\\Users\\a\\doc.txt now"),
            [("windows_path", "C:\\Users\\a\\doc.txt")],
        )

    def test_windows_path_before_comma(self):
        self.assertEqual(
            _pairs("Saved to C:\\Users\\a\\report.pdf, please check"),
            [("windows_path", "C:\\Users\\a\\report.pdf")],
        )

    def test_unc_path(self):
        self.assertEqual(
            _pairs("at \\\\server\\share\\file.txt."),
            [("windows_path", "\\\\server\\share\\file.txt.")],
        )

    def test_www_beats_hostname(self):
        self.assertEqual(
            _pairs("visit www.example.com/page today"),
            [("www", "www.example.com/page")],
        )

    def test_unix_paths(self):
        self.assertEqual(
            _pairs("edit /etc/nginx/nginx.conf or run ./scripts/build.sh"),
            [("unix_path", "/etc/nginx/nginx.conf"), ("unix_path", "./scripts/build.sh")],
        )

    def test_ip_and_localhost(self):
        self.assertEqual(_pairs("ping 10.0.0.1 now"), [("ip", "10.0.0.1")])
        self.assertEqual(_pairs("served on localhost:8080"), [("ip", "localhost")])

    def test_hostname(self):
        self.assertEqual(_pairs("go to example.org."), [("hostname", "example.org")])

    def test_leftmost_match_wins(self):
        self.assertEqual(
            _pairs("example.org https://a.com"),
            [("hostname", "example.org"), ("url", "https://a.com")],
        )

    def test_spans(self):
        text = "mail bob@example.com or see https://example.com/x"
        for token in tokenize(text):
            self.assertEqual(text[token.start:token.end], token.text)

    def test_empty(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(None), [])

    def test_iter_candidates_is_lazy(self):
        candidates = iter_candidates("a.com b.com")
        self.assertEqual(next(candidates), "a.com")
        self.assertEqual(list(candidates), ["b.com"])


class TestCleanCandidate(unittest.TestCase):
    def test_sentence_break(self):
        self.assertEqual(clean_candidate("google.com, and then"), "google.com")

    def test_trailing_punctuation(self):
        self.assertEqual(clean_candidate("https://x.org/a."), "https://x.org/a")
        self.assertEqual(clean_candidate("  a.b;  "), "a.b")

    def test_idempotent(self):
        for raw in ("google.com, and then", "https://x.org/a.", "  a.b;  ", "plain", "x.org/a))"):
            once = clean_candidate(raw)
            self.assertEqual(clean_candidate(once), once)

    def test_none(self):
        self.assertEqual(clean_candidate(None), "")

    def test_unbalanced_closing_paren(self):
        self.assertEqual(clean_candidate("https://example.com/a)"), "https://example.com/a")
        self.assertEqual(clean_candidate("https://example.com)."), "https://example.com")
        self.assertEqual(
            clean_candidate("https://en.wikipedia.org/wiki/Foo_(bar)"),
            "https://en.wikipedia.org/wiki/Foo_(bar)",
        )


if __name__ == "__main__":
    unittest.main()
