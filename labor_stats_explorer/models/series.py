"""Data models for BLS series and observations."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any


ALL = "all"

VIEW_ALL = "all"
VIEW_NATIONAL = "national"
VIEW_STATES = "states"
VIEWS = (VIEW_ALL, VIEW_NATIONAL, VIEW_STATES)

DEFAULT_STATE = "Florida"

_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class SeriesDescriptor:
    """Static metadata for one BLS series."""

    id: str
    name: str
    category: str
    subcategory: str | None
    unit: str


@dataclass(frozen=True)
class Footnote:
    """Annotation attached to an observation."""

    text: str
    code: str | None = None


@dataclass(frozen=True)
class DataPoint:
    """Single observation with its series metadata copied on."""

    id: str
    name: str
    category: str
    subcategory: str | None
    unit: str
    year: str
    period: str
    period_name: str
    value: str | None
    footnotes: tuple[Footnote, ...] = ()

    @classmethod
    def from_observation(cls, descriptor: SeriesDescriptor, raw: dict[str, Any]) -> "DataPoint":
        """Build a record from one raw BLS observation dict."""
        footnotes = tuple(
            Footnote(text=fn["text"], code=fn.get("code"))
            for fn in raw.get("footnotes") or []
            if fn and fn.get("text")
        )
        value = raw.get("value")
        return cls(
            id=descriptor.id,
            name=descriptor.name,
            category=descriptor.category,
            subcategory=descriptor.subcategory,
            unit=descriptor.unit,
            year=str(raw.get("year", "")),
            period=str(raw.get("period", "")),
            period_name=str(raw.get("periodName", "")),
            value=None if value is None else str(value),
            footnotes=footnotes,
        )


@dataclass(frozen=True)
class FilterSelection:
    """Current dropdown selections. 'all' disables a dimension."""

    category: str = ALL
    subcategory: str = ALL
    year: str = ALL
    period: str = ALL

    @classmethod
    def initial(cls, view: str) -> "FilterSelection":
        """Reset state for a view: the states view starts on the default state."""
        if view == VIEW_STATES:
            return cls(subcategory=DEFAULT_STATE)
        return cls()

    def with_changes(self, **changes: str) -> "FilterSelection":
        return replace(self, **changes)


@dataclass(frozen=True)
class FilterOptions:
    """Distinct values available for each filter dropdown."""

    categories: tuple[str, ...] = ()
    subcategories: tuple[str, ...] = ()
    years: tuple[str, ...] = ()
    periods: tuple[str, ...] = ()


@dataclass(frozen=True)
class SeriesStatistics:
    """Descriptive statistics for one series, formatted to 2 decimals."""

    total_count: int
    average: str
    median: str
    mode: str
    min: str
    max: str


@dataclass(frozen=True)
class AcquisitionResult:
    """Records from one fetch cycle plus per-series failure messages."""

    records: tuple[DataPoint, ...] = ()
    diagnostics: tuple[str, ...] = ()


def _leading_int(text: str) -> int:
    digits = _DIGITS.search(text or "")
    return int(digits.group()) if digits else 0


def recency_key(point: DataPoint) -> tuple[int, int]:
    """Sort key for (year, period): M03 -> 3, A01 -> 1, missing -> 0."""
    return _leading_int(point.year), _leading_int(point.period)


def sort_by_recency(points: Iterable[DataPoint]) -> list[DataPoint]:
    """Most recent first. Stable, so ties keep their input order."""
    return sorted(points, key=recency_key, reverse=True)
