"""CLI tests with the HTTP client stubbed out."""

from __future__ import annotations

import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

import requests

from ContentSearch.cli.ui import cli

_CONFIG_YAML = """
log:
  level: WARNING
  to_file: false
  dir: log

elasticsearch:
  host: http://placeholder:9200
  content_index: content
  channel_index: channel
"""


class _StubClient:
    def __init__(self, payload: dict | None = None, error: Exception | None = None) -> None:
        self.payload = payload or {}
        self.error = error
        self.calls: list[tuple[str, dict]] = []
        self.closed = False

    def search(self, index: str, body: dict) -> dict:
        self.calls.append((index, body))
        if self.error is not None:
            raise self.error
        return self.payload

    def close(self) -> None:
        self.closed = True


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "config.yml"
        self.config_path.write_text(_CONFIG_YAML, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _invoke(self, client: _StubClient, args: list[str]):
        with patch("ContentSearch.cli.runner.create_client", return_value=client):
            return CliRunner().invoke(cli, ["--config", str(self.config_path), *args])

    def test_contents_prints_collection(self) -> None:
        client = _StubClient({"hits": {"total": {"value": 1}, "hits": [{"_id": "r1", "_source": {"title": "Harry"}}]}})

        result = self._invoke(
            client,
            ["contents", "--term", "harry", "--content-type", "series", "--sort", "title:asc", "--page", "2"],
        )

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            json.loads(result.output),
            {"results": [{"id": "r1", "title": "Harry"}], "page": 2, "limit": 20, "totalDocs": 1},
        )
        index, body = client.calls[0]
        self.assertEqual(index, "content")
        self.assertEqual(body["sort"][0], {"title.keyword": {"order": "asc"}})
        self.assertTrue(client.closed)

    def test_channels_uses_channel_index(self) -> None:
        client = _StubClient({})

        result = self._invoke(client, ["channels", "--start-date", "2024-05-01"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(client.calls[0][0], "channel")
        self.assertEqual(json.loads(result.output)["totalDocs"], 0)

    def test_suggest_prints_list(self) -> None:
        client = _StubClient({"suggest": {"title.suggest": [{"options": [{"text": "harry potter"}]}]}})

        result = self._invoke(client, ["suggest", "har"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), ["harry potter"])

    def test_client_apps_command(self) -> None:
        client = _StubClient({})

        result = self._invoke(client, ["client-apps", "harry", "--page", "1", "--limit", "5"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(client.calls[0][1]["size"], 5)

    def test_failure_aborts(self) -> None:
        client = _StubClient(error=requests.ConnectionError("down"))

        result = self._invoke(client, ["contents", "--term", "harry"])

        self.assertNotEqual(result.exit_code, 0)
        self.assertTrue(client.closed)

    def test_malformed_sort_is_rejected(self) -> None:
        result = self._invoke(_StubClient({}), ["contents", "--sort", ":asc"])
        self.assertEqual(result.exit_code, 2)


if __name__ == "__main__":
    unittest.main()
