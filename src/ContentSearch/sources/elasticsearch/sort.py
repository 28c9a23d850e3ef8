"""Sort compilation for content and channel searches.

Text fields are analyzed in the index and cannot be sorted on directly, so
caller sort keys are rewritten to their ``.keyword`` sub-field unless the
field is known to be sortable as-is.

Classification for content sorting
- NO_SUFFIX: contributors / categories / contentType / ratings
- DIRECT:    language / id / vodType, plus engine meta fields like ``_score``
- KEYWORD:   everything else -> ``<field>.keyword``

Caller criteria keep their order and always precede the default tie-breakers.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from ContentSearch.core.query import SortCriterion, parse_direction

KEYWORD_SUFFIX = ".keyword"

NO_SUFFIX_FIELDS: frozenset[str] = frozenset({"contributors", "categories", "contentType", "ratings"})
DIRECT_FIELDS: frozenset[str] = frozenset({"language", "id", "vodType"})

CHANNEL_KEYWORD_FIELD = "channelTitle"

CONTENT_DEFAULT_SORT: tuple[SortCriterion, ...] = (
    SortCriterion("_score", "desc"),
    SortCriterion("dateCreated", "desc"),
)
CHANNEL_DEFAULT_SORT: tuple[SortCriterion, ...] = (SortCriterion("_score", "desc"),)


class SortFieldKind(Enum):
    NO_SUFFIX = "no_suffix"
    DIRECT = "direct"
    KEYWORD = "keyword"


def classify_sort_field(field: str) -> SortFieldKind:
    """Classify a content sort field by how it must be addressed."""
    if field in NO_SUFFIX_FIELDS:
        return SortFieldKind.NO_SUFFIX
    if field in DIRECT_FIELDS or field.startswith("_"):
        return SortFieldKind.DIRECT
    return SortFieldKind.KEYWORD


def build_content_sort(sort_by: Mapping[str, str] | None) -> tuple[SortCriterion, ...]:
    """Compile caller sort preferences for the content index.

    Args:
        sort_by: Ordered mapping of field name to direction, or ``None``.

    Returns:
        Caller criteria (rewritten per classification) followed by
        ``_score desc, dateCreated desc``.

    Raises:
        ValueError: If a direction is not ``asc``/``desc``.
    """
    if not sort_by:
        return CONTENT_DEFAULT_SORT

    criteria: list[SortCriterion] = []
    for field, direction in sort_by.items():
        name = str(field).strip()
        if not name:
            continue
        if classify_sort_field(name) is SortFieldKind.KEYWORD:
            name = f"{name}{KEYWORD_SUFFIX}"
        criteria.append(SortCriterion(name, parse_direction(direction)))
    return tuple(criteria) + CONTENT_DEFAULT_SORT


def build_channel_sort(sort_by: Mapping[str, str] | None) -> tuple[SortCriterion, ...]:
    """Compile caller sort preferences for the channel index.

    Caller sorting applies only when ``channelTitle`` is requested; it is
    rewritten to its keyword sub-field and the other keys are kept in caller
    order. Without ``channelTitle`` the result is sorted by relevance only.
    """
    if not sort_by or not any(str(field).strip() == CHANNEL_KEYWORD_FIELD for field in sort_by):
        return CHANNEL_DEFAULT_SORT

    criteria: list[SortCriterion] = []
    for field, direction in sort_by.items():
        name = str(field).strip()
        if not name:
            continue
        if name == CHANNEL_KEYWORD_FIELD:
            name = f"{name}{KEYWORD_SUFFIX}"
        criteria.append(SortCriterion(name, parse_direction(direction)))
    return tuple(criteria) + CHANNEL_DEFAULT_SORT
