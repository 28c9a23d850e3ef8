"""Elasticsearch query compiler.

Compiles the structured search parameters into request bodies for the
content and channel indexes.

Rules
- Free text is scored (``must``); category, country, dates and id are
  unscored filters (``filter``).
- Content type and ratings are scored disjunctions (``must`` + ``should``).
- With no clause at all the query is ``match_all``; otherwise it is a
  ``bool`` carrying both ``must`` and ``filter``, even when one is empty.
"""

from __future__ import annotations

from typing import Sequence

from ContentSearch.core.models import ChannelSearchParams, ClientAppsSearchParams, ContentSearchParams
from ContentSearch.core.query import (
    Bool,
    BoolShould,
    Clause,
    CompletionSuggest,
    Match,
    MatchAll,
    MultiMatch,
    Query,
    SearchBody,
    SortCriterion,
    WeightedField,
)
from ContentSearch.sources.elasticsearch.filters import (
    CONTENT_DATE_FIELDS,
    build_any_match,
    build_channel_date_filter,
    build_country_filter,
    build_date_range_filter,
)
from ContentSearch.sources.elasticsearch.pagination import coerce_pagination, compute_window
from ContentSearch.sources.elasticsearch.sort import build_channel_sort, build_content_sort
from ContentSearch.utils.log import log

SUGGEST_SUFFIX = ".suggest"
DEFAULT_SUGGESTION_LIMIT = 10

CONTENT_TERM_FIELDS: tuple[WeightedField, ...] = (
    WeightedField("title"),
    WeightedField("title.*", 1.5),
    WeightedField("description"),
    WeightedField("description.*", 1.5),
    WeightedField("contributors.name"),
    WeightedField("contributors.name.*", 1.5),
)
CATEGORY_FIELDS: tuple[WeightedField, ...] = (
    WeightedField("categories"),
    WeightedField("categories.*", 1.5),
)
CHANNEL_TERM_FIELDS: tuple[WeightedField, ...] = (
    WeightedField("channelTitle"),
    WeightedField("transmissionTitle"),
    WeightedField("channelTitle.*", 1.5),
    WeightedField("transmissionTitle.*", 1.5),
)
CLIENT_APPS_TERM_FIELDS: tuple[WeightedField, ...] = (
    WeightedField("title", 4),
    WeightedField("title.*", 4.5),
    WeightedField("description", 2),
    WeightedField("description.*", 2.5),
    WeightedField("contributors.name", 2),
    WeightedField("contributors.name.*", 2.5),
    WeightedField("categories", 1),
    WeightedField("categories.*", 1),
    WeightedField("keywords", 1),
    WeightedField("keywords.*", 1),
)
CLIENT_APPS_SORT: tuple[SortCriterion, ...] = (SortCriterion("_score", "desc"),)


def build_bool_query(must: Sequence[Clause], filter: Sequence[Clause]) -> Bool:  # noqa: A002 - engine term
    """Wrap clause lists into a ``bool`` query, keeping both lists present."""
    return Bool(must=tuple(must), filter=tuple(filter))


def build_root_query(must: Sequence[Clause], filter: Sequence[Clause]) -> Query:  # noqa: A002 - engine term
    """Return ``match_all`` for an unconstrained search, else a ``bool``."""
    if not must and not filter:
        return MatchAll()
    return build_bool_query(must, filter)


def build_contents_body(params: ContentSearchParams) -> tuple[SearchBody, int | None, int | None]:
    """Compile content search parameters into a request body.

    Args:
        params: Content search parameters.

    Returns:
        Tuple of ``(body, page, limit)`` where page/limit are the coerced
        values the result should echo.

    Raises:
        ValueError: If a sort direction or date bound is invalid.
    """
    must: list[Clause] = []
    filters: list[Clause] = []

    if params.term:
        must.append(MultiMatch(fields=CONTENT_TERM_FIELDS, query=params.term))

    if params.category:
        filters.append(MultiMatch(fields=CATEGORY_FIELDS, query=params.category))

    if params.country:
        filters.append(build_country_filter(params.country))

    date_filter = build_date_range_filter(params.start_date, params.end_date, CONTENT_DATE_FIELDS)
    if date_filter is not None:
        filters.append(date_filter)

    if params.content_id:
        filters.append(Match("id", params.content_id))

    if params.content_type:
        must.append(build_any_match("contentType", params.content_type, upper=True))

    if params.ratings:
        must.append(build_any_match("ratings.ratingValue", params.ratings))

    page, limit = coerce_pagination(params.page, params.limit)

    body = SearchBody(
        query=build_root_query(must, filters),
        sort=build_content_sort(params.sort_by),
        window=compute_window(page, limit),
    )
    log.debug("Compiled contents query: must=%d filter=%d page=%s limit=%s", len(must), len(filters), page, limit)
    return body, page, limit


def build_channels_body(params: ChannelSearchParams) -> tuple[SearchBody, int | None, int | None]:
    """Compile channel search parameters into a request body.

    Returns:
        Tuple of ``(body, page, limit)`` as in ``build_contents_body``.
    """
    must: list[Clause] = []
    filters: list[Clause] = []

    if params.term:
        must.append(MultiMatch(fields=CHANNEL_TERM_FIELDS, query=params.term))

    date_filter = build_channel_date_filter(params.start_date, params.end_date)
    if date_filter is not None:
        filters.append(date_filter)

    page, limit = coerce_pagination(params.page, params.limit)

    body = SearchBody(
        query=build_root_query(must, filters),
        sort=build_channel_sort(params.sort_by),
        window=compute_window(page, limit),
    )
    log.debug("Compiled channels query: must=%d filter=%d page=%s limit=%s", len(must), len(filters), page, limit)
    return body, page, limit


def build_client_apps_body(params: ClientAppsSearchParams) -> SearchBody:
    """Compile the broad, boosted content search used by client applications."""
    query = BoolShould(should=(MultiMatch(fields=CLIENT_APPS_TERM_FIELDS, query=params.term),))
    log.debug("Compiled client apps query: term=%r page=%s limit=%s", params.term, params.page, params.limit)
    return SearchBody(
        query=query,
        sort=CLIENT_APPS_SORT,
        window=compute_window(params.page, params.limit),
    )


def build_suggest_body(text: str, property_name: str) -> CompletionSuggest:
    """Build a completion request against ``<property_name>.suggest``."""
    return CompletionSuggest(
        field=f"{property_name}{SUGGEST_SUFFIX}",
        prefix=text,
        size=DEFAULT_SUGGESTION_LIMIT,
        skip_duplicates=True,
    )
