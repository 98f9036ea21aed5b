"""CLI tests with the HTTP client patched out."""

from __future__ import annotations

import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from CitySearch.cli import cli
from CitySearch.config.api import API_URL_ENV
from CitySearch.sources.api.client import CityApiClient
from CitySearch.sources.api.errors import ApiTransportError
from CitySearch.utils.log import log


def _city_payload(*names: str) -> dict:
    return {
        "command": "searchCity",
        "items": [
            {
                "id": idx,
                "score": 1.0,
                "matchedName": name,
                "name": name,
                "population": 1000 * idx,
                "adminUnit": "Texas" if name == "Paris" else None,
                "country": "United States" if name == "Paris" else "Japan",
            }
            for idx, name in enumerate(names, start=1)
        ],
        "elapsedMs": 2,
        "cacheHitRatePercent": 50.0,
    }


def _make_runner() -> CliRunner:
    """Create CliRunner with best-effort stderr capture."""
    try:
        return CliRunner(mix_stderr=True)
    except TypeError:
        # Newer Click versions always mix stderr into output.
        return CliRunner()


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        env = patch.dict(os.environ, {}, clear=False)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop(API_URL_ENV, None)
        self.addCleanup(log.handlers.clear)

        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.json_config = Path(tmp.name) / "json.yml"
        self.json_config.write_text(
            "log:\n  level: WARNING\n"
            "api:\n  base_url: http://search.test\n  max_items: 10\n"
            "controller:\n  debounce_ms: 200\n  timeout_ms: 2000\n"
            "output:\n  format: json\n",
            encoding="utf-8",
        )
        self.runner = _make_runner()

    def test_search_console_output(self) -> None:
        with patch.object(CityApiClient, "post", return_value=_city_payload("Paris")) as post:
            result = self.runner.invoke(
                cli,
                ["--config", str(REPO_ROOT / "config" / "default.yml"), "search", "paris texas", "--max-items", "3"],
                catch_exceptions=False,
            )

        self.assertEqual(result.exit_code, 0, result.output)
        post.assert_called_once_with({"command": "searchCity", "query": "paris texas", "maxItems": 3})
        self.assertIn("Fetched 1 items", result.output)
        self.assertIn("1. Paris, Texas, United States", result.output)

    def test_request_simple_command_json_output(self) -> None:
        payload = {"command": "searchClimate", "items": [], "elapsedMs": 5}
        with patch.object(CityApiClient, "post", return_value=payload) as post:
            result = self.runner.invoke(cli, ["--config", str(self.json_config), "request", "14823"])

        self.assertEqual(result.exit_code, 0, result.output)
        post.assert_called_once_with({"command": "searchClimate", "cityId": 14823, "maxItems": 100})
        self.assertEqual(json.loads(result.output.strip()), payload)

    def test_request_rejects_bad_json(self) -> None:
        result = self.runner.invoke(cli, ["--config", str(self.json_config), "request", '{"command": 1}'])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Unknown command", result.output)

    def test_search_failure_aborts(self) -> None:
        with patch.object(CityApiClient, "post", side_effect=ApiTransportError("HTTP 503: down", status_code=503)):
            result = self.runner.invoke(cli, ["--config", str(self.json_config), "search", "Tokyo"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Search failed: HTTP 503: down", result.output)

    def test_interactive_fast_typing_sends_one_request(self) -> None:
        with patch.object(CityApiClient, "post", return_value=_city_payload("Tokyo")) as post:
            result = self.runner.invoke(
                cli,
                ["--config", str(self.json_config), "interactive"],
                input="T\nTo\nTok\nTokyo\n",
                catch_exceptions=False,
            )

        self.assertEqual(result.exit_code, 0, result.output)
        post.assert_called_once_with({"command": "searchCity", "query": "Tokyo", "maxItems": 10})
        documents = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        self.assertEqual(len(documents), 1)
        self.assertEqual(documents[0]["query"], "Tokyo")
        self.assertFalse(documents[0]["failed"])
        self.assertEqual([item["name"] for item in documents[0]["items"]], ["Tokyo"])

    def test_interactive_failure_sets_indicator(self) -> None:
        with patch.object(CityApiClient, "post", side_effect=ApiTransportError("HTTP 503: down", status_code=503)):
            result = self.runner.invoke(
                cli,
                ["--config", str(self.json_config), "interactive"],
                input="Tokyo\n",
                catch_exceptions=False,
            )

        self.assertEqual(result.exit_code, 0, result.output)
        documents = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        self.assertEqual(documents, [{"query": "", "failed": True, "items": []}])


if __name__ == "__main__":
    unittest.main()
