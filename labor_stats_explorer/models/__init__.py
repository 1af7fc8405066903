"""Data models."""

from labor_stats_explorer.models.series import (
    ALL,
    DEFAULT_STATE,
    VIEW_ALL,
    VIEW_NATIONAL,
    VIEW_STATES,
    VIEWS,
    AcquisitionResult,
    DataPoint,
    FilterOptions,
    FilterSelection,
    Footnote,
    SeriesDescriptor,
    SeriesStatistics,
    recency_key,
    sort_by_recency,
)

__all__ = [
    "ALL",
    "DEFAULT_STATE",
    "VIEW_ALL",
    "VIEW_NATIONAL",
    "VIEW_STATES",
    "VIEWS",
    "AcquisitionResult",
    "DataPoint",
    "FilterOptions",
    "FilterSelection",
    "Footnote",
    "SeriesDescriptor",
    "SeriesStatistics",
    "recency_key",
    "sort_by_recency",
]
