"""JSON output renderers.

Renders paginated collections and suggestion lists into JSON-serializable
objects and text for command output.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from typing import Any, Sequence

from ContentSearch.core.models import PaginatedCollection


def render_collection(collection: PaginatedCollection[Any]) -> dict[str, Any]:
    """Render a collection as ``{results, page, limit, totalDocs}``.

    Documents exposing ``to_dict()`` are rendered through it; dataclasses
    fall back to ``dataclasses.asdict``; anything else is passed through.
    """
    return {
        "results": [_render_document(doc) for doc in collection.results],
        "page": collection.page,
        "limit": collection.limit,
        "totalDocs": collection.total_docs,
    }


def render_suggestions(suggestions: Sequence[str]) -> list[str]:
    return list(suggestions)


def dumps(payload: Any) -> str:
    """Serialize a rendered payload with readable indentation."""
    return json.dumps(payload, ensure_ascii=False, indent=2, default=_json_default)


def _render_document(doc: Any) -> Any:
    to_dict = getattr(doc, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(doc) and not isinstance(doc, type):
        return dataclasses.asdict(doc)
    return doc


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
