"""
Unit tests for the HTTP fetch wrapper (requests is mocked).
"""

import unittest
from unittest.mock import MagicMock, patch

import requests
from requests.utils import get_encoding_from_headers

from venuescrape.errors import FetchError
from venuescrape.events import parse_events
from venuescrape.fetch import fetch_html


def _mock_response(content: bytes = b"", status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    return resp


def _real_response(content: bytes, content_type: str) -> requests.Response:
    resp = requests.Response()
    resp.status_code = 200
    resp._content = content
    resp.headers["Content-Type"] = content_type
    resp.encoding = get_encoding_from_headers(resp.headers)
    return resp


class TestFetchHtml(unittest.TestCase):
    @patch("venuescrape.fetch.requests.get")
    def test_success(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _mock_response(b"<html></html>")
        self.assertEqual(fetch_html("https://example.com", timeout=5), b"<html></html>")

        args, kwargs = mock_get.call_args
        self.assertEqual(args, ("https://example.com",))
        self.assertEqual(kwargs["timeout"], 5)
        self.assertIn("User-Agent", kwargs["headers"])

    @patch("venuescrape.fetch.requests.get")
    def test_non_200_status(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _mock_response(b"gone", status_code=404)
        with self.assertRaises(FetchError) as ctx:
            fetch_html("https://example.com/missing")
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.url, "https://example.com/missing")

    @patch("venuescrape.fetch.requests.get")
    def test_transport_failure(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(FetchError) as ctx:
            fetch_html("https://example.com")
        self.assertIsNone(ctx.exception.status_code)
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    @patch("venuescrape.fetch.requests.get")
    def test_read_failure(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.exceptions.ChunkedEncodingError("truncated")
        with self.assertRaises(FetchError) as ctx:
            fetch_html("https://example.com")
        self.assertIn("failed to read response", str(ctx.exception))

    @patch("venuescrape.fetch.requests.get")
    def test_body_is_returned_undecoded(self, mock_get: MagicMock) -> None:
        # text/html without charset: requests would decode as ISO-8859-1
        body = (
            '<html><head><meta charset="utf-8"></head><body>'
            '<div class="layout--pmktermin"><div class="field--name-field-titel">Grüß Gott</div></div>'
            "</body></html>"
        ).encode("utf-8")
        mock_get.return_value = _real_response(body, "text/html")

        raw = fetch_html("https://www.pmk.or.at/termine")
        self.assertEqual(raw, body)
        self.assertEqual(parse_events(raw, "pmk")[0].title, "Grüß Gott")

    @patch("venuescrape.fetch.requests.get")
    def test_no_retry(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.Timeout("slow")
        with self.assertRaises(FetchError):
            fetch_html("https://example.com")
        self.assertEqual(mock_get.call_count, 1)


if __name__ == "__main__":
    unittest.main()
