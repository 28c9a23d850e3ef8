"""Page/limit handling for Elasticsearch ``from``/``size`` windows."""

from __future__ import annotations

import re
from typing import Any

from ContentSearch.core.query import Window

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def compute_window(page: Any, limit: Any) -> Window | None:
    """Translate a page number and page size into an engine window.

    A window is produced only when both values are truthy positive integers.
    Anything else returns ``None`` so the engine's default window applies,
    rather than forcing page 1.

    Args:
        page: 1-based page number.
        limit: Page size.

    Returns:
        ``Window(offset=(page - 1) * limit, size=limit)`` or ``None``.
    """
    if not page or not limit:
        return None
    if isinstance(page, bool) or isinstance(limit, bool):
        return None
    if not isinstance(page, int) or not isinstance(limit, int):
        return None
    if page < 1 or limit < 1:
        return None
    return Window(offset=(page - 1) * limit, size=limit)


def coerce_pagination(page: Any, limit: Any) -> tuple[Any, Any]:
    """Coerce raw page/limit input once pagination has been requested.

    When neither value is given both are returned untouched. When at least
    one is given, each is read from its leading integer prefix (``"2.5"`` is
    page 2, ``"5abc"`` is 5) and any missing, non-numeric or non-positive
    value falls back to page 1 / limit 20.

    Returns:
        Tuple of ``(page, limit)``.
    """
    if not page and not limit:
        return page, limit
    return _to_positive_int(page, DEFAULT_PAGE), _to_positive_int(limit, DEFAULT_LIMIT)


def _to_positive_int(value: Any, default: int) -> int:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, float):
        value = int(value)
    match = _LEADING_INT_RE.match(str(value))
    if match is None:
        return default
    parsed = int(match.group(1))
    return parsed if parsed > 0 else default
