from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Literal, Protocol, Sequence, Union

SortDirection = Literal["asc", "desc"]

_DIRECTIONS: frozenset[str] = frozenset({"asc", "desc"})


class Clause(Protocol):
    """A node of the search-engine query tree."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the clause into the engine query DSL."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class WeightedField:
    """A field reference with an optional relevance boost.

    ``boost=None`` renders the bare field name, otherwise ``name^boost``.
    """

    name: str
    boost: float | None = None

    def render(self) -> str:
        if self.boost is None:
            return self.name
        return f"{self.name}^{self.boost:g}"


@dataclass(frozen=True, slots=True)
class MatchAll:
    def to_dict(self) -> dict[str, Any]:
        return {"match_all": {}}


@dataclass(frozen=True, slots=True)
class MultiMatch:
    """Full-text match of one text against a weighted field list."""

    fields: Sequence[WeightedField]
    query: str
    type: str = "best_fields"

    def to_dict(self) -> dict[str, Any]:
        return {
            "multi_match": {
                "fields": [field.render() for field in self.fields],
                "query": self.query,
                "type": self.type,
            }
        }


@dataclass(frozen=True, slots=True)
class Match:
    field: str
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {"match": {self.field: self.value}}


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive range on a single field; absent bounds are not emitted."""

    field: str
    gte: Any = None
    lte: Any = None

    def to_dict(self) -> dict[str, Any]:
        bounds: dict[str, Any] = {}
        if self.gte is not None:
            bounds["gte"] = serialize_value(self.gte)
        if self.lte is not None:
            bounds["lte"] = serialize_value(self.lte)
        return {"range": {self.field: bounds}}


@dataclass(frozen=True, slots=True)
class BoolShould:
    """Disjunction: at least one of ``should`` must match."""

    should: Sequence[Clause]

    def to_dict(self) -> dict[str, Any]:
        return {"bool": {"should": [clause.to_dict() for clause in self.should]}}


@dataclass(frozen=True, slots=True)
class BoolExclude:
    """Conjunction of ``must`` clauses with ``must_not`` exclusions."""

    must: Sequence[Clause]
    must_not: Sequence[Clause]

    def to_dict(self) -> dict[str, Any]:
        return {
            "bool": {
                "must": [clause.to_dict() for clause in self.must],
                "must_not": [clause.to_dict() for clause in self.must_not],
            }
        }


@dataclass(frozen=True, slots=True)
class Bool:
    """Scored ``must`` plus unscored ``filter`` sequences.

    Both sequences are always emitted, even when empty, so consumers see a
    stable ``{"bool": {"must": [...], "filter": [...]}}`` shape.
    """

    must: Sequence[Clause] = ()
    filter: Sequence[Clause] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "bool": {
                "must": [clause.to_dict() for clause in self.must],
                "filter": [clause.to_dict() for clause in self.filter],
            }
        }


Query = Union[MatchAll, Bool, BoolShould]


@dataclass(frozen=True, slots=True)
class SortCriterion:
    field: str
    direction: SortDirection = "desc"

    def to_dict(self) -> dict[str, Any]:
        return {self.field: {"order": self.direction}}


@dataclass(frozen=True, slots=True)
class Window:
    """Engine-native pagination window."""

    offset: int
    size: int

    def to_dict(self) -> dict[str, int]:
        return {"from": self.offset, "size": self.size}


@dataclass(frozen=True, slots=True)
class SearchBody:
    """A complete search request body: query, sort and optional window."""

    query: Query
    sort: Sequence[SortCriterion]
    window: Window | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "query": self.query.to_dict(),
            "sort": [criterion.to_dict() for criterion in self.sort],
        }
        if self.window is not None:
            body.update(self.window.to_dict())
        return body


@dataclass(frozen=True, slots=True)
class CompletionSuggest:
    """Prefix completion request against a ``completion`` sub-field."""

    field: str
    prefix: str
    size: int = 10
    skip_duplicates: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "_source": False,
            "suggest": {
                self.field: {
                    "prefix": self.prefix,
                    "completion": {
                        "field": self.field,
                        "size": self.size,
                        "skip_duplicates": self.skip_duplicates,
                    },
                }
            },
        }


def parse_direction(value: Any) -> SortDirection:
    """Normalize a caller-supplied sort direction.

    Raises:
        ValueError: If the value is not ``asc`` or ``desc`` (any case).
    """
    normalized = str(value).strip().lower()
    if normalized not in _DIRECTIONS:
        raise ValueError(f"Unsupported sort direction: {value!r}")
    return normalized  # type: ignore[return-value]


def serialize_value(value: Any) -> Any:
    """Render dates as ISO-8601 text, pass everything else through."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value
