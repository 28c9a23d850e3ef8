from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar, Union

DateBound = Union[datetime, date, str]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ContentSearchParams:
    """Search intent for the content index.

    Every field is optional; ``None`` means "no constraint". ``page`` and
    ``limit`` are kept loosely typed because they usually arrive as raw
    query-string values and are coerced when the query is built.

    Attributes:
        term: Free text matched against titles, descriptions and contributors.
        category: Category text, applied as a non-scoring filter.
        country: ISO country code checked against each usage policy.
        start_date: Lower bound on any of the content date fields.
        end_date: Upper bound on any of the content date fields.
        content_id: Exact content identifier.
        content_type: Accepted content types (any matches).
        ratings: Accepted rating values (any matches).
        sort_by: Ordered mapping of field name to ``asc``/``desc``.
        page: 1-based page number.
        limit: Page size.
    """

    term: Optional[str] = None
    category: Optional[str] = None
    country: Optional[str] = None
    start_date: Optional[DateBound] = None
    end_date: Optional[DateBound] = None
    content_id: Optional[str] = None
    content_type: Optional[Sequence[str]] = None
    ratings: Optional[Sequence[str]] = None
    sort_by: Optional[Mapping[str, str]] = None
    page: Any = None
    limit: Any = None


@dataclass(frozen=True, slots=True)
class ChannelSearchParams:
    """Search intent for the channel/transmission index."""

    term: Optional[str] = None
    sort_by: Optional[Mapping[str, str]] = None
    start_date: Optional[DateBound] = None
    end_date: Optional[DateBound] = None
    page: Any = None
    limit: Any = None


@dataclass(frozen=True, slots=True)
class ClientAppsSearchParams:
    """Search intent for client applications: a required term plus paging."""

    term: str
    page: Any = None
    limit: Any = None


@dataclass(frozen=True, slots=True)
class SearchHit:
    id: str
    source: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SearchHits:
    """Normalized hit list and total-match count of one search response."""

    hits: Sequence[SearchHit] = ()
    total: int = 0


@dataclass(frozen=True, slots=True)
class PaginatedCollection(Generic[T]):
    """One page of mapped documents.

    Attributes:
        results: Documents in engine hit order.
        page: Echoed page number, 1 when unset.
        limit: Echoed page size, ``None`` when unset.
        total_docs: Total number of matching documents in the index.
    """

    results: Sequence[T]
    page: int = 1
    limit: Optional[int] = None
    total_docs: int = 0


@dataclass(frozen=True, slots=True)
class Content:
    """Default document produced from a search hit.

    Attributes:
        id: Document identifier.
        fields: Raw source fields except ``id``, kept read-only.
    """

    id: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self.id == other.id and dict(self.fields) == dict(other.fields)

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.fields}
