"""Unit tests for the Headers container."""

import unittest

import httpx
import requests

from crawlkit.fetcher import headers as header_names
from crawlkit.fetcher.headers import Headers


class TestHeaders(unittest.TestCase):
    def test_empty(self):
        headers = Headers()
        self.assertEqual(headers.size(), 0)
        self.assertEqual(len(headers), 0)
        self.assertEqual(headers.names(), [])
        self.assertEqual(str(headers), "")

    def test_add_keeps_order(self):
        headers = Headers()
        headers.add("X", "a")
        headers.add("X", "b")
        self.assertEqual(headers.get_values("X"), ["a", "b"])
        self.assertEqual(headers.get("X"), "a")
        self.assertTrue(headers.is_multi_valued("X"))
        self.assertEqual(headers.size(), 1)

    def test_add_allows_duplicates(self):
        headers = Headers()
        headers.add("X", "a")
        headers.add("X", "a")
        self.assertEqual(headers.get_values("X"), ["a", "a"])

    def test_set_replaces_values(self):
        headers = Headers()
        headers.add("X", "a")
        headers.add("X", "b")
        headers.set("X", "c")
        self.assertEqual(headers.get_values("X"), ["c"])
        self.assertFalse(headers.is_multi_valued("X"))

    def test_set_none_removes(self):
        headers = Headers()
        headers.add("X", "a")
        headers.add("X", "b")
        headers.set("X", None)
        self.assertIsNone(headers.get("X"))
        self.assertNotIn("X", headers.names())
        self.assertNotIn("X", headers)
        self.assertEqual(headers.size(), 0)

    def test_set_none_on_missing_name(self):
        headers = Headers()
        headers.set("X", None)
        self.assertEqual(headers.size(), 0)

    def test_unknown_name(self):
        headers = Headers()
        self.assertIsNone(headers.get("Missing"))
        self.assertEqual(headers.get_values("Missing"), [])
        self.assertFalse(headers.is_multi_valued("Missing"))

    def test_names_are_case_sensitive(self):
        headers = Headers()
        headers.set(header_names.CONTENT_TYPE, "text/html")
        headers.set("content-type", "text/plain")
        self.assertEqual(headers.size(), 2)
        self.assertEqual(headers.get("Content-Type"), "text/html")
        self.assertEqual(headers.get("content-type"), "text/plain")
        self.assertIsNone(headers.get("CONTENT-TYPE"))

    def test_get_values_returns_copy(self):
        headers = Headers()
        headers.add("X", "a")
        headers.get_values("X").append("b")
        self.assertEqual(headers.get_values("X"), ["a"])

    def test_str(self):
        headers = Headers()
        headers.add("A", "1")
        headers.add("A", "2")
        headers.add("B", "3")
        self.assertEqual(str(headers), "A=1 A=2 B=3 ")

    def test_constructor_copies_mapping(self):
        source = {"A": ["1", "2"], "B": "3", "Empty": []}
        headers = Headers(source)
        self.assertEqual(headers.get_values("A"), ["1", "2"])
        self.assertEqual(headers.get_values("B"), ["3"])
        self.assertNotIn("Empty", headers)
        self.assertEqual(headers.size(), 2)

        source["A"].append("4")
        self.assertEqual(headers.get_values("A"), ["1", "2"])

    def test_constructor_with_none(self):
        self.assertEqual(Headers(None).size(), 0)

    def test_constructor_skips_missing_values(self):
        headers = Headers({"A": None, "B": ["1", None, "2"], "C": [None]})
        self.assertEqual(headers.names(), ["B"])
        self.assertEqual(headers.get_values("B"), ["1", "2"])
        self.assertIsNone(headers.get("A"))

    def test_constructor_copies_headers(self):
        original = Headers()
        original.add("Set-Cookie", "a=1")
        original.add("Set-Cookie", "b=2")
        original.set("Location", "https://example.com/")

        copy = Headers(original)
        self.assertEqual(copy, original)
        self.assertEqual(copy.get_values("Set-Cookie"), ["a=1", "b=2"])

        copy.add("Set-Cookie", "c=3")
        self.assertEqual(original.get_values("Set-Cookie"), ["a=1", "b=2"])

    def test_to_dict_and_iteration(self):
        headers = Headers({"A": ["1", "2"], "B": ["3"]})
        self.assertEqual(headers.to_dict(), {"A": ["1", "2"], "B": ["3"]})
        self.assertEqual(sorted(headers), ["A", "B"])
        self.assertEqual(headers, Headers(headers.to_dict()))

    def test_constants(self):
        self.assertEqual(Headers.CONTENT_ENCODING, "Content-Encoding")
        self.assertEqual(Headers.CONTENT_LANGUAGE, "Content-Language")
        self.assertEqual(Headers.CONTENT_LENGTH, "Content-Length")
        self.assertEqual(Headers.CONTENT_LOCATION, "Content-Location")
        self.assertEqual(Headers.CONTENT_DISPOSITION, "Content-Disposition")
        self.assertEqual(Headers.CONTENT_MD5, "Content-MD5")
        self.assertEqual(Headers.CONTENT_TYPE, "Content-Type")
        self.assertEqual(Headers.LAST_MODIFIED, "Last-Modified")
        self.assertEqual(Headers.LOCATION, "Location")


class TestHeadersFromResponse(unittest.TestCase):
    def test_from_requests_response(self):
        response = requests.Response()
        response.headers["Content-Type"] = "text/html"
        response.headers["Location"] = "https://example.com/"
        headers = Headers.from_response(response)
        self.assertEqual(headers.get(Headers.CONTENT_TYPE), "text/html")
        self.assertEqual(headers.get(Headers.LOCATION), "https://example.com/")

    def test_from_httpx_response_keeps_repeated_headers(self):
        response = httpx.Response(200, headers=[("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])
        headers = Headers.from_response(response)
        self.assertEqual(headers.get_values("set-cookie"), ["a=1", "b=2"])


if __name__ == "__main__":
    unittest.main()
