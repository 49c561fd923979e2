"""
Tests for the WebUrl value type.
"""

import dataclasses
import unittest

from pathment_scanner.core.web_url import WebUrl
from pathment_scanner.protocol import TransferProtocol


class TestWebUrl(unittest.TestCase):
    def setUp(self):
        self.url = WebUrl(
            TransferProtocol.HTTPS, "www", "example.com", 8080, "/a b", "q=1", "frag"
        )

    def test_host(self):
        self.assertEqual(self.url.host, "www.example.com")
        self.assertTrue(self.url.has_subdomain)

    def test_display_keeps_raw_components(self):
        self.assertEqual(self.url.display_url, "https://www.example.com:8080/a b?q=1#frag")
        self.assertEqual(
            self.url.display_url_without_protocol, "www.example.com:8080/a b?q=1#frag"
        )

    def test_uri_is_encoded(self):
        self.assertEqual(self.url.to_uri_string(), "https://www.example.com:8080/a%20b?q=1#frag")
        self.assertEqual(
            self.url.to_uri_string_without_protocol(), "www.example.com:8080/a%20b?q=1#frag"
        )

    def test_already_encoded_not_doubled(self):
        url = WebUrl(TransferProtocol.HTTPS, "", "example.com", -1, "/a%20b")
        self.assertEqual(url.to_uri_string(), "https://example.com/a%20b")

    def test_path_without_leading_slash(self):
        url = WebUrl(TransferProtocol.HTTPS, "", "a.com", -1, "x")
        self.assertEqual(url.display_url, "https://a.com/x")
        self.assertEqual(url.to_uri_string(), "https://a.com/x")

    def test_scheme_without_host_raises(self):
        with self.assertRaises(ValueError):
            WebUrl(TransferProtocol.HTTPS).to_uri_string()

    def test_port_out_of_range(self):
        with self.assertRaises(ValueError):
            WebUrl(TransferProtocol.HTTP, "", "a.com", 70000)

    def test_none_protocol(self):
        url = WebUrl(None, "", "a.com")
        self.assertIs(url.protocol, TransferProtocol.NONE)
        self.assertFalse(url.has_protocol)
        self.assertEqual(url.display_url, "a.com")

    def test_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.url.port = 1

    def test_with_protocol(self):
        switched = self.url.with_protocol(TransferProtocol.HTTP)
        self.assertTrue(switched.display_url.startswith("http://www.example.com"))
        self.assertIs(self.url.protocol, TransferProtocol.HTTPS)


class TestHeuristics(unittest.TestCase):
    def test_directory_guess(self):
        def make(path):
            return WebUrl(TransferProtocol.HTTPS, "", "a.com", -1, path)

        self.assertTrue(make("/galleries/funny-boats").path_looks_like_directory())
        self.assertTrue(make("/docs/").path_looks_like_directory())
        self.assertTrue(make("").path_looks_like_directory())
        self.assertFalse(make("/assets/style.css").path_looks_like_directory())

    def test_domain_parts(self):
        url = WebUrl(TransferProtocol.HTTPS, "www", "example.co.uk")
        self.assertEqual(url.domain_name(), "example")
        self.assertEqual(url.top_level_domain(), "uk")

    def test_no_host(self):
        url = WebUrl()
        self.assertIsNone(url.domain_name())
        self.assertIsNone(url.top_level_domain())
        self.assertFalse(url.is_host_structurally_valid())


if __name__ == "__main__":
    unittest.main()
