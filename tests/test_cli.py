"""
Tests for the CLI entry point.

These tests focus on:
- exit codes (0 success, 1 failure)
- reading documents from local files (no network)
- fetching through venuescrape.fetch (mocked)
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from venuescrape.cli import main
from venuescrape.errors import FetchError

PMK_PAGE = """
<html><body>
  <div class="layout layout--pmktermin">
    <time datetime="2024-05-01T20:00:00Z">1. Mai</time>
    <div class="field--name-field-titel">Show</div>
  </div>
  <div class="layout layout--pmktermin">
    <time datetime="2024-05-02T20:00:00Z">2. Mai</time>
    <div class="field--name-field-titel">Zweite Show</div>
    <div class="field--type-text-with-summary"><p>Mit <a href="/band">Band</a></p></div>
  </div>
</body></html>
"""


def _run(argv: list) -> tuple:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        try:
            main(argv)
        except SystemExit as exc:
            return exc.code, out.getvalue(), err.getvalue()
    return None, out.getvalue(), err.getvalue()


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.page = Path(self._tmp.name) / "pmk.html"
        self.page.write_text(PMK_PAGE, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_sites(self) -> None:
        code, out, _ = _run(["sites"])
        self.assertEqual(code, 0)
        self.assertIn("pmk | PMK | https://www.pmk.or.at/termine", out)
        self.assertIn("treibhaus", out)

    def test_events_from_file(self) -> None:
        code, out, _ = _run(["events", "pmk", "--file", str(self.page)])
        self.assertEqual(code, 0)
        lines = out.strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("2024-05-01T20:00:00Z | PMK | Show"))
        self.assertIn("[missing: description]", lines[0])
        self.assertEqual(lines[1], "2024-05-02T20:00:00Z | PMK | Zweite Show | Mit Band")

    def test_events_json(self) -> None:
        code, out, _ = _run(["events", "pmk", "--file", str(self.page), "--json", "--venue", "Bogen 13"])
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual([d["title"] for d in data], ["Show", "Zweite Show"])
        self.assertEqual({d["venue"] for d in data}, {"Bogen 13"})

    def test_events_fetches_site_url(self) -> None:
        with patch("venuescrape.cli.fetch_html", return_value=PMK_PAGE.encode("utf-8")) as mock_fetch:
            code, out, _ = _run(["events", "pmk"])
        self.assertEqual(code, 0)
        mock_fetch.assert_called_once_with("https://www.pmk.or.at/termine")
        self.assertIn("Zweite Show", out)

    def test_events_fetch_failure(self) -> None:
        err = FetchError("https://www.pmk.or.at/termine", "request did not respond 200", status_code=503)
        with patch("venuescrape.cli.fetch_html", side_effect=err):
            code, out, stderr = _run(["events", "pmk"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("did not respond 200", stderr)

    def test_unknown_site(self) -> None:
        code, _, stderr = _run(["events", "nope", "--file", str(self.page)])
        self.assertEqual(code, 1)
        self.assertIn("nope", stderr)

    def test_missing_file(self) -> None:
        code, _, _ = _run(["events", "pmk", "--file", str(Path(self._tmp.name) / "missing.html")])
        self.assertEqual(code, 1)

    def test_no_events(self) -> None:
        empty = Path(self._tmp.name) / "empty.html"
        empty.write_text("", encoding="utf-8")
        code, out, _ = _run(["events", "treibhaus", "--file", str(empty)])
        self.assertEqual(code, 0)
        self.assertIn("No events found.", out)

    def test_links_from_file(self) -> None:
        code, out, _ = _run(["links", "--file", str(self.page)])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "/band | Band")

    def test_links_requires_source(self) -> None:
        code, _, _ = _run(["links"])
        self.assertEqual(code, 2)

    def test_file_and_url_are_exclusive(self) -> None:
        code, _, _ = _run(["links", "--file", "a.html", "--url", "https://example.com"])
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
