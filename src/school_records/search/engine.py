"""Search and filtering shared by every list page.

All functions are pure: they never mutate their input and keep the input's
relative order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

from ..common.datetime_utils import to_calendar_date
from ..core.constants import FILTER_ALL

FieldRef = Union[str, Callable[[Any], Any]]


def _read(record: Any, ref: FieldRef) -> Any:
    if callable(ref):
        return ref(record)
    if isinstance(record, Mapping):
        return record.get(ref)
    return getattr(record, ref, None)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def is_disabled(value: Any) -> bool:
    """``None``, blank and the ``"all"`` sentinel switch a filter off."""
    if value is None:
        return True
    text = _text(value).strip()
    return not text or text.lower() == FILTER_ALL


@dataclass(frozen=True)
class SearchSpec:
    """Which fields each kind of criterion looks at.

    ``categorical`` maps a filter name to the field compared exactly
    (case-insensitive); ``contains`` maps a filter name to a field compared
    by substring (assignment tags act as a subject this way).
    """

    text_fields: Sequence[FieldRef] = ()
    categorical: Mapping[str, FieldRef] = field(default_factory=dict)
    contains: Mapping[str, FieldRef] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchCriteria:
    term: str = ""
    filters: Mapping[str, Any] = field(default_factory=dict)
    date_field: Optional[FieldRef] = None
    start: Optional[date] = None
    end: Optional[date] = None


def matches_term(record: Any, term: str, text_fields: Sequence[FieldRef]) -> bool:
    needle = (term or "").strip().lower()
    if not needle:
        return True
    return any(needle in _text(_read(record, ref)).lower() for ref in text_fields)


def filter_records(records: Iterable[Any], criteria: SearchCriteria, spec: SearchSpec) -> list:
    term = (criteria.term or "").strip().lower()

    active_exact = []
    active_contains = []
    for name, value in (criteria.filters or {}).items():
        if is_disabled(value):
            continue
        wanted = _text(value).strip().lower()
        if name in spec.categorical:
            active_exact.append((spec.categorical[name], wanted))
        elif name in spec.contains:
            active_contains.append((spec.contains[name], wanted))

    ranged = criteria.date_field is not None and (criteria.start is not None or criteria.end is not None)

    out = []
    for record in records:
        if term and not matches_term(record, term, spec.text_fields):
            continue
        if any(_text(_read(record, ref)).strip().lower() != wanted for ref, wanted in active_exact):
            continue
        if any(wanted not in _text(_read(record, ref)).lower() for ref, wanted in active_contains):
            continue
        if ranged:
            day = to_calendar_date(_read(record, criteria.date_field))
            if day is None:
                continue
            if criteria.start is not None and day < criteria.start:
                continue
            if criteria.end is not None and day > criteria.end:
                continue
        out.append(record)
    return out


def distinct_values(records: Iterable[Any], ref: FieldRef) -> list[str]:
    """Unique non-blank values in first-seen order (filter dropdown options)."""

    seen: dict[str, None] = {}
    for record in records:
        value = _text(_read(record, ref)).strip()
        if value and value not in seen:
            seen[value] = None
    return list(seen)


@dataclass(frozen=True)
class ListView:
    """A filtered list plus what the page needs to render around it."""

    items: list
    total: int
    ok: bool = True
    notifications: tuple = ()
    options: Mapping[str, list] = field(default_factory=dict)


def criteria_from_args(args: Mapping[str, Any], filter_names: Sequence[str]) -> SearchCriteria:
    """Build criteria from query-string style arguments (``search`` + named filters)."""

    filters = {name: args.get(name) for name in filter_names if args.get(name) is not None}
    start = to_calendar_date(args.get("start")) if args.get("start") else None
    end = to_calendar_date(args.get("end")) if args.get("end") else None
    return SearchCriteria(term=str(args.get("search") or ""), filters=filters, start=start, end=end)
