"""Filtering and descriptive statistics over fetched records."""

from labor_stats_explorer.analysis.filters import (
    apply_filters,
    compute_options,
    key_series_loaded,
    match_state_name,
    next_selection,
    search_transition,
)
from labor_stats_explorer.analysis.statistics import summarize

__all__ = [
    "apply_filters",
    "compute_options",
    "key_series_loaded",
    "match_state_name",
    "next_selection",
    "search_transition",
    "summarize",
]
