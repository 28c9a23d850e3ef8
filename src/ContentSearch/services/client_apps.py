"""Content search tuned for client applications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ContentSearch.core.models import ClientAppsSearchParams, Content, PaginatedCollection
from ContentSearch.services.search import DocumentMapper, SearchExecutor
from ContentSearch.sources.elasticsearch.parser import parse_content, unwrap_hits
from ContentSearch.sources.elasticsearch.query import build_client_apps_body
from ContentSearch.utils.log import log

if TYPE_CHECKING:
    from ContentSearch.config import ElasticsearchConfig


@dataclass(slots=True)
class ClientAppsSearchService:
    """Relevance-only content search with heavier title boosts.

    Unlike ``ContentSearchService.fetch_contents`` there are no filters and
    page/limit are used as given: a window is applied only when both are
    positive integers.
    """

    executor: SearchExecutor
    config: ElasticsearchConfig
    mapper: DocumentMapper = parse_content

    def fetch_contents(self, params: ClientAppsSearchParams) -> PaginatedCollection[Content]:
        body = build_client_apps_body(params).to_dict()
        index = self.config.content_index
        log.debug("Client apps search index=%s body=%s", index, body)
        result = unwrap_hits(self.executor.search(index, body))
        log.info("Client apps search completed: hits=%d total=%d", len(result.hits), result.total)
        return PaginatedCollection(
            results=[self.mapper(hit.id, hit.source) for hit in result.hits],
            page=params.page or 1,
            limit=params.limit or None,
            total_docs=result.total,
        )
