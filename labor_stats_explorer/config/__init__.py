"""Settings and the static series catalog."""

from labor_stats_explorer.config.settings import (
    BLS_API_BASE_URL,
    DEFAULT_END_YEAR,
    DEFAULT_START_YEAR,
    Settings,
)
from labor_stats_explorer.config.series_catalog import (
    DEFAULT_CATALOG,
    INFLATION,
    NATIONAL,
    STATE_DATA,
    SeriesCatalog,
)

__all__ = [
    "BLS_API_BASE_URL",
    "DEFAULT_CATALOG",
    "DEFAULT_END_YEAR",
    "DEFAULT_START_YEAR",
    "INFLATION",
    "NATIONAL",
    "STATE_DATA",
    "SeriesCatalog",
    "Settings",
]
