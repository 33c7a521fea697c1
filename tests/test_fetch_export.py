"""
Unittest suite for the fetch stage and the end-to-end export.

The network is never touched: `requests.get` is patched for the
fetcher tests and `fetch_page` is patched for the pipeline tests,
which write into a temporary directory.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests

from listing_html import build_page, build_row
from pokestats import cli
from pokestats.collect.fetcher import fetch_page
from pokestats.errors import NetworkError, ParseError
from pokestats.settings import SOURCE_URL, USER_AGENT


def _response(text: str, content_type: str = "text/html; charset=utf-8") -> mock.Mock:
    resp = mock.Mock(spec=requests.Response)
    resp.text = text
    resp.content = text.encode("utf-8")
    resp.status_code = 200
    resp.headers = {"Content-Type": content_type}
    resp.encoding = "utf-8" if "charset" in content_type else "ISO-8859-1"
    return resp


class TestFetchPage(unittest.TestCase):
    """Test cases for the listing page fetcher."""

    @mock.patch("pokestats.collect.fetcher.requests.get")
    def test_sends_user_agent(self, get_mock: mock.Mock) -> None:
        get_mock.return_value = _response("<html></html>")
        self.assertEqual(fetch_page(SOURCE_URL), "<html></html>")
        get_mock.assert_called_once_with(
            SOURCE_URL, headers={"User-Agent": USER_AGENT}, timeout=30
        )

    @mock.patch("pokestats.collect.fetcher.requests.get")
    def test_defaults_to_utf8_without_charset(self, get_mock: mock.Mock) -> None:
        resp = _response("<html></html>", content_type="text/html")
        get_mock.return_value = resp
        fetch_page(SOURCE_URL)
        self.assertEqual(resp.encoding, "utf-8")

    @mock.patch("pokestats.collect.fetcher.requests.get")
    def test_http_error_is_wrapped(self, get_mock: mock.Mock) -> None:
        resp = _response("Not Found")
        resp.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        get_mock.return_value = resp
        with self.assertRaises(NetworkError) as ctx:
            fetch_page(SOURCE_URL)
        self.assertIsInstance(ctx.exception.__cause__, requests.HTTPError)

    @mock.patch("pokestats.collect.fetcher.requests.get")
    def test_connection_error_is_wrapped(self, get_mock: mock.Mock) -> None:
        get_mock.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(NetworkError):
            fetch_page(SOURCE_URL)


class TestExport(unittest.TestCase):
    """Test cases for the whole pipeline and the command line wrapper."""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.out = Path(self.temp_dir.name) / "PokemonBaseStatsArray.txt"
        self.html = build_page(
            [
                build_row("0003", "Venusaur", [80, 82, 83, 100, 100, 80]),
                build_row("0003", "Venusaur", [80, 100, 123, 122, 120, 80], form="Mega Venusaur"),
                build_row("—", "Footnote", [1, 2, 3, 4, 5, 6]),
                build_row("0025", "Pikachu", [35, 55, 40, 50, 50, 90]),
            ]
        )

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_export_writes_document(self) -> None:
        with mock.patch("pokestats.cli.fetch_page", return_value=self.html) as fetch_mock:
            path = cli.export(out=str(self.out))
        fetch_mock.assert_called_once_with(SOURCE_URL)
        self.assertEqual(path, self.out.resolve())
        lines = self.out.read_text(encoding="utf-8").splitlines()
        self.assertEqual(lines[4], "static const BaseStats BASE_STATS_TABLE[] = {")
        self.assertEqual(
            lines[5:9],
            [
                "    {   0,   0,   0,   0,   0,   0,   0 },  // 0 (placeholder)",
                "    {   3,  80,  82,  83, 100, 100,  80 },  // 3 Venusaur",
                "    {  25,  35,  55,  40,  50,  50,  90 },  // 25 Pikachu",
                "};",
            ],
        )
        megas = lines.index("static const BaseStats BASE_STATS_TABLE_MEGAS[] = {")
        self.assertEqual(
            lines[megas + 1],
            "    {   3,  80, 100, 123, 122, 120,  80 },  // 3 Mega Venusaur",
        )
        self.assertEqual(lines[megas + 2], "};")

    def test_missing_table_does_not_write(self) -> None:
        with mock.patch("pokestats.cli.fetch_page", return_value="<html></html>"):
            with self.assertRaises(ParseError):
                cli.export(out=str(self.out))
        self.assertFalse(self.out.exists())

    def test_main_reports_failure(self) -> None:
        with mock.patch("pokestats.cli.export", side_effect=NetworkError("offline")):
            with self.assertLogs("pokestats.cli", level="ERROR") as logs:
                status = cli.main(["--no-pause"])
        self.assertEqual(status, 1)
        self.assertIn("offline", logs.output[0])

    def test_main_reports_broken_catalogue(self) -> None:
        broken = Path(self.temp_dir.name) / "catalogue.yaml"
        broken.write_text("rules: [\n", encoding="utf-8")
        with mock.patch("pokestats.cli.fetch_page", return_value=self.html), mock.patch(
            "pokestats.classify.rules.CATALOGUE_PATH", broken
        ):
            with self.assertLogs("pokestats.cli", level="ERROR") as logs:
                status = cli.main(["--no-pause"])
        self.assertEqual(status, 1)
        self.assertIn("invalid YAML", logs.output[0])

    def test_main_success(self) -> None:
        with mock.patch("pokestats.cli.export", return_value=self.out) as export_mock:
            self.assertEqual(cli.main(["--no-pause"]), 0)
        export_mock.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
