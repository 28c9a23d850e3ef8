"""Elasticsearch response parser."""

from __future__ import annotations

from typing import Any, Mapping

from ContentSearch.core.models import Content, SearchHit, SearchHits


def unwrap_hits(payload: Any) -> SearchHits:
    """Normalize a raw search response into hits and a total count.

    Every level is optional: a missing or malformed ``hits``, ``hits.hits``
    or ``hits.total`` degrades to an empty hit list and a zero total.
    ``hits.total`` may be an object with ``value`` or a bare integer.

    Args:
        payload: Decoded JSON response body.

    Returns:
        Normalized ``SearchHits``.
    """
    outer = payload.get("hits") if isinstance(payload, Mapping) else None
    if not isinstance(outer, Mapping):
        return SearchHits()

    raw_hits = outer.get("hits")
    hits: list[SearchHit] = []
    if isinstance(raw_hits, list):
        for raw_hit in raw_hits:
            if not isinstance(raw_hit, Mapping):
                continue
            source = raw_hit.get("_source")
            hits.append(
                SearchHit(
                    id=_safe_str(raw_hit.get("_id")),
                    source=dict(source) if isinstance(source, Mapping) else {},
                )
            )

    return SearchHits(hits=tuple(hits), total=_extract_total(outer.get("total")))


def extract_suggestions(payload: Any, field: str) -> list[str]:
    """Return option texts of the first suggestion group for ``field``.

    A missing ``suggest`` section, a missing field key, an empty group list
    or missing ``options`` all yield an empty list.
    """
    suggest = payload.get("suggest") if isinstance(payload, Mapping) else None
    if not isinstance(suggest, Mapping):
        return []

    groups = suggest.get(field)
    if not isinstance(groups, list) or not groups:
        return []

    first = groups[0]
    options = first.get("options") if isinstance(first, Mapping) else None
    if not isinstance(options, list):
        return []

    texts: list[str] = []
    for option in options:
        if isinstance(option, Mapping) and option.get("text") is not None:
            texts.append(str(option["text"]))
    return texts


def parse_content(doc_id: str, source: Mapping[str, Any]) -> Content:
    """Map one hit to a ``Content`` document.

    The hit identifier is applied first and the source fields are merged
    over it, so an ``id`` stored in the source takes precedence.
    """
    doc: dict[str, Any] = {"id": doc_id, **source}
    resolved_id = _safe_str(doc.pop("id")) or doc_id
    return Content(id=resolved_id, fields=doc)


def _extract_total(value: Any) -> int:
    if isinstance(value, Mapping):
        value = value.get("value")
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)


def _safe_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
