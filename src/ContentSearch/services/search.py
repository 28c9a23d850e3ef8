"""Search service layer for content and channel documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol

from ContentSearch.core.models import (
    ChannelSearchParams,
    Content,
    ContentSearchParams,
    PaginatedCollection,
)
from ContentSearch.sources.elasticsearch.parser import extract_suggestions, parse_content, unwrap_hits
from ContentSearch.sources.elasticsearch.query import (
    build_channels_body,
    build_contents_body,
    build_suggest_body,
)
from ContentSearch.utils.log import log

if TYPE_CHECKING:
    from ContentSearch.config import ElasticsearchConfig

DocumentMapper = Callable[[str, Mapping[str, Any]], Any]


class SearchExecutor(Protocol):
    """Protocol for the capability that runs a search request."""

    def search(self, index: str, body: Mapping[str, Any]) -> Mapping[str, Any]:
        """Execute ``body`` against ``index`` and return the raw response."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by the executor."""
        raise NotImplementedError


@dataclass(slots=True)
class ContentSearchService:
    """Builds, executes and normalizes content and channel searches.

    Each call builds a fresh request body, issues exactly one request and
    maps the hits in engine order. Executor failures propagate unchanged.
    """

    executor: SearchExecutor
    config: ElasticsearchConfig
    mapper: DocumentMapper = parse_content

    def fetch_contents(self, params: ContentSearchParams | None = None) -> PaginatedCollection[Content]:
        """Search the content index.

        Args:
            params: Content search parameters; ``None`` searches everything.

        Returns:
            One page of mapped documents with echoed page/limit.
        """
        params = params or ContentSearchParams()
        body, page, limit = build_contents_body(params)
        return self._collect(self.config.content_index, body.to_dict(), page, limit)

    def fetch_channels(self, params: ChannelSearchParams | None = None) -> PaginatedCollection[Content]:
        """Search the channel/transmission index."""
        params = params or ChannelSearchParams()
        body, page, limit = build_channels_body(params)
        return self._collect(self.config.channel_index, body.to_dict(), page, limit)

    def suggest(self, text: str, property_name: str) -> list[str]:
        """Return completion suggestions for ``text`` on ``property_name``.

        Args:
            text: Prefix typed by the user.
            property_name: Document property whose ``.suggest`` sub-field is
                queried, e.g. ``title``.

        Returns:
            Suggestion texts in engine order; empty when nothing matched.
        """
        request = build_suggest_body(text, property_name)
        index = self.config.content_index
        log.debug("Suggest request index=%s body=%s", index, request.to_dict())
        payload = self.executor.search(index, request.to_dict())
        suggestions = extract_suggestions(payload, request.field)
        log.debug("Suggest completed field=%s count=%d", request.field, len(suggestions))
        return suggestions

    def close(self) -> None:
        """Release the executor."""
        close_func = getattr(self.executor, "close", None)
        if callable(close_func):
            close_func()

    def _collect(
        self,
        index: str,
        body: Mapping[str, Any],
        page: Any,
        limit: Any,
    ) -> PaginatedCollection[Content]:
        log.debug("Search request index=%s body=%s", index, body)
        payload = self.executor.search(index, body)
        result = unwrap_hits(payload)
        log.info("Search completed: index=%s hits=%d total=%d", index, len(result.hits), result.total)
        return PaginatedCollection(
            results=[self.mapper(hit.id, hit.source) for hit in result.hits],
            page=page or 1,
            limit=limit or None,
            total_docs=result.total,
        )
