"""Reusable filter clauses for content and channel queries."""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from dateutil import parser as dt_parser

from ContentSearch.core.models import DateBound
from ContentSearch.core.query import Bool, BoolExclude, BoolShould, Clause, Match, Range

CONTENT_DATE_FIELDS: tuple[str, ...] = ("dateCreated", "dateModified", "dateReleased")
CHANNEL_START_FIELD = "startDate"
CHANNEL_END_FIELD = "endDate"

_POLICY_DEFAULT_FIELD = "usagePolicy.default"
_POLICY_EXCEPTIONS_FIELD = "usagePolicy.exceptionCountryCodes"


def build_date_range_filter(
    start: DateBound | None,
    end: DateBound | None,
    fields: Sequence[str],
) -> BoolShould | None:
    """Build a disjunctive range filter over candidate date fields.

    A document matches when any one of ``fields`` falls in range. Both
    bounds give ``[start, end]`` inclusive, a single bound gives an open
    range on that side, and no bounds give no filter.

    Args:
        start: Inclusive lower bound.
        end: Inclusive upper bound.
        fields: Candidate date fields, emitted in order.

    Returns:
        ``BoolShould`` of one ``Range`` per field, or ``None``.
    """
    gte = normalize_date_bound(start)
    lte = normalize_date_bound(end)
    if gte is None and lte is None:
        return None
    if not fields:
        return None
    return BoolShould(should=tuple(Range(field=name, gte=gte, lte=lte) for name in fields))


def build_channel_date_filter(start: DateBound | None, end: DateBound | None) -> BoolShould | None:
    """Build the channel schedule filter.

    With both bounds either ``startDate`` or ``endDate`` may fall inside the
    window. A lone start bound only constrains ``startDate`` and a lone end
    bound only constrains ``endDate``.
    """
    gte = normalize_date_bound(start)
    lte = normalize_date_bound(end)
    if gte is not None and lte is not None:
        fields: tuple[str, ...] = (CHANNEL_START_FIELD, CHANNEL_END_FIELD)
    elif gte is not None:
        fields = (CHANNEL_START_FIELD,)
    elif lte is not None:
        fields = (CHANNEL_END_FIELD,)
    else:
        return None
    return build_date_range_filter(gte, lte, fields)


def build_country_filter(country: str) -> BoolShould:
    """Build the availability filter for one country code.

    Content is visible when its policy allows by default and the country is
    not an exception, or when its policy blocks by default and the country
    is listed as an exception.
    """
    allowed = BoolExclude(
        must=(Match(_POLICY_DEFAULT_FIELD, "ALLOW"),),
        must_not=(Match(_POLICY_EXCEPTIONS_FIELD, country),),
    )
    unblocked = Bool(
        must=(
            Match(_POLICY_DEFAULT_FIELD, "BLOCK"),
            Match(_POLICY_EXCEPTIONS_FIELD, country),
        ),
    )
    return BoolShould(should=(allowed, unblocked))


def build_any_match(field: str, values: Sequence[str], *, upper: bool = False) -> BoolShould:
    """Require ``field`` to equal at least one of ``values``."""
    clauses: list[Clause] = []
    for value in values:
        text = str(value)
        clauses.append(Match(field, text.upper() if upper else text))
    return BoolShould(should=tuple(clauses))


def normalize_date_bound(value: DateBound | None) -> datetime | date | None:
    """Normalize a date bound to ``datetime``/``date``.

    Strings are parsed as ISO-8601; empty strings count as absent.

    Raises:
        ValueError: If a string bound is not a valid ISO-8601 date.
    """
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return dt_parser.isoparse(text)
    except (TypeError, ValueError) as error:
        raise ValueError(f"Invalid date bound: {value!r}") from error
