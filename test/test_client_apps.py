"""Tests for the client-apps content search."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ContentSearch.config import ElasticsearchConfig
from ContentSearch.core.models import ClientAppsSearchParams, Content
from ContentSearch.services.client_apps import ClientAppsSearchService


class _RecordingExecutor:
    def __init__(self, payload: dict) -> None:
        self.payload = payload
        self.calls: list[tuple[str, dict]] = []

    def search(self, index: str, body: dict) -> dict:
        self.calls.append((index, body))
        return self.payload


def _service(executor: _RecordingExecutor) -> ClientAppsSearchService:
    config = ElasticsearchConfig(host="http://placeholder:9200", content_index="content", channel_index="channel")
    return ClientAppsSearchService(executor=executor, config=config)


class TestClientAppsSearch(unittest.TestCase):
    def test_boosted_should_query(self) -> None:
        executor = _RecordingExecutor({"hits": {"total": {"value": 1}, "hits": [{"_id": "r1", "_source": {"a": "1"}}]}})

        result = _service(executor).fetch_contents(ClientAppsSearchParams(term="harry"))

        index, body = executor.calls[0]
        self.assertEqual(index, "content")
        (clause,) = body["query"]["bool"]["should"]
        self.assertEqual(
            clause["multi_match"]["fields"],
            [
                "title^4",
                "title.*^4.5",
                "description^2",
                "description.*^2.5",
                "contributors.name^2",
                "contributors.name.*^2.5",
                "categories^1",
                "categories.*^1",
                "keywords^1",
                "keywords.*^1",
            ],
        )
        self.assertEqual(body["sort"], [{"_score": {"order": "desc"}}])
        self.assertNotIn("from", body)
        self.assertEqual(result.results, [Content("r1", {"a": "1"})])
        self.assertEqual((result.page, result.limit, result.total_docs), (1, None, 1))

    def test_paging_is_used_as_given(self) -> None:
        executor = _RecordingExecutor({})

        result = _service(executor).fetch_contents(ClientAppsSearchParams(term="harry", page=3, limit=10))

        _, body = executor.calls[0]
        self.assertEqual((body["from"], body["size"]), (20, 10))
        self.assertEqual((result.page, result.limit, result.total_docs), (3, 10, 0))

    def test_page_without_limit_is_not_defaulted(self) -> None:
        executor = _RecordingExecutor({})

        result = _service(executor).fetch_contents(ClientAppsSearchParams(term="harry", page=2))

        self.assertNotIn("size", executor.calls[0][1])
        self.assertEqual((result.page, result.limit), (2, None))


if __name__ == "__main__":
    unittest.main()
