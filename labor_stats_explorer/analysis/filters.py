"""Filter options, search and per-series truncation for the record list."""

from collections.abc import Iterable, Sequence

from labor_stats_explorer.config.series_catalog import (
    NONFARM_EMPLOYMENT_SUFFIX,
    STATE_DATA,
    UNEMPLOYMENT_RATE_SUFFIX,
)
from labor_stats_explorer.models import (
    ALL,
    VIEW_STATES,
    DataPoint,
    FilterOptions,
    FilterSelection,
    sort_by_recency,
)


# Category choices offered on the states view, mapped to the name fragment they match
STATE_CATEGORIES: dict[str, str] = {
    "Unemployment rate": UNEMPLOYMENT_RATE_SUFFIX.strip(),
    "nonfarm employment": NONFARM_EMPLOYMENT_SUFFIX.strip(),
}

MAX_RECORDS_PER_SERIES = 5

# Headline series the header reports on
KEY_SERIES = ("National Unemployment Rate", "Consumer Price Index", "Producer Price Index")


def _distinct(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def compute_options(records: Sequence[DataPoint], view: str) -> FilterOptions:
    """Distinct values for each dropdown, in order of first appearance."""
    if view == VIEW_STATES:
        categories = tuple(STATE_CATEGORIES)
    else:
        categories = _distinct(r.category for r in records)

    subcategories = _distinct(
        r.name.replace(UNEMPLOYMENT_RATE_SUFFIX, "")
        for r in records
        if r.category == STATE_DATA
    )

    return FilterOptions(
        categories=categories,
        subcategories=subcategories,
        years=_distinct(r.year for r in records),
        periods=_distinct(r.period for r in records),
    )


def matches_search(record: DataPoint, query: str) -> bool:
    """Case-insensitive match of the query against name, value, period name and year.

    A field matches when it contains the query or the query contains it.
    """
    if not query:
        return True
    needle = query.lower()
    for field_value in (record.name, record.value, record.period_name, record.year):
        if not field_value:
            continue
        text = str(field_value).lower()
        if needle in text or text in needle:
            return True
    return False


def _matches_category(record: DataPoint, view: str, category: str) -> bool:
    if category == ALL:
        return True
    if view == VIEW_STATES:
        fragment = STATE_CATEGORIES.get(category)
        return fragment is None or fragment in record.name
    return record.category == category


def _matches_subcategory(record: DataPoint, view: str, subcategory: str) -> bool:
    if subcategory == ALL or view != VIEW_STATES:
        return True
    return record.name.startswith(subcategory)


def matches_selection(record: DataPoint, view: str, selection: FilterSelection) -> bool:
    return (
        _matches_category(record, view, selection.category)
        and _matches_subcategory(record, view, selection.subcategory)
        and (selection.year == ALL or record.year == selection.year)
        and (selection.period == ALL or record.period == selection.period)
    )


def limit_per_series(
    records: Iterable[DataPoint], limit: int = MAX_RECORDS_PER_SERIES
) -> list[DataPoint]:
    """Keep the first `limit` records of each series name.

    Groups come out in order of first appearance.
    """
    groups: dict[str, list[DataPoint]] = {}
    for record in records:
        group = groups.setdefault(record.name, [])
        if len(group) < limit:
            group.append(record)
    return [record for group in groups.values() for record in group]


def apply_filters(
    records: Sequence[DataPoint],
    view: str,
    selection: FilterSelection,
    submitted_search: str = "",
) -> list[DataPoint]:
    """
    Filter, sort and truncate records for display.

    Args:
        records: Full record list from the last fetch cycle
        view: "all", "national" or "states"
        selection: Current dropdown selections
        submitted_search: Search text the user submitted (not live input)

    Returns:
        At most MAX_RECORDS_PER_SERIES of the most recent records per
        series name, grouped by name
    """
    passing = [
        r
        for r in records
        if matches_search(r, submitted_search) and matches_selection(r, view, selection)
    ]
    return limit_per_series(sort_by_recency(passing))


def match_state_name(search: str, state_names: Iterable[str]) -> str | None:
    """First state whose name contains the search text or is contained in it."""
    needle = search.strip().lower()
    if not needle:
        return None
    for state in state_names:
        name = state.lower()
        if needle in name or name in needle:
            return state
    return None


def key_series_loaded(records: Iterable[DataPoint]) -> bool:
    """True when every headline series has at least one record."""
    names = {r.name for r in records}
    return all(any(key in name for name in names) for key in KEY_SERIES)


def next_selection(view: str, selection: FilterSelection, **changes: str) -> FilterSelection:
    """Selection after the user changes one or more dropdowns.

    On the states view, picking another state starts from a clean
    selection for that state; other changes keep the remaining filters.
    """
    state = changes.get("subcategory", selection.subcategory)
    if view == VIEW_STATES and state != selection.subcategory:
        return FilterSelection(subcategory=state)
    return selection.with_changes(**changes)


def search_transition(
    search: str, view: str, selection: FilterSelection, state_names: Iterable[str]
) -> tuple[str, FilterSelection]:
    """View and selection after a submitted search.

    A search naming a state switches to the states view on that state.
    Anything else leaves both unchanged.
    """
    state = match_state_name(search, state_names)
    if state:
        return VIEW_STATES, FilterSelection(subcategory=state)
    return view, selection
