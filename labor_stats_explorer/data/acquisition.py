"""Fetch-cycle orchestration: pick series for a view, fetch, normalize."""

import logging
from typing import Any, Protocol

from labor_stats_explorer.config import (
    DEFAULT_CATALOG,
    INFLATION,
    NATIONAL,
    STATE_DATA,
    SeriesCatalog,
    Settings,
)
from labor_stats_explorer.errors import AcquisitionError, LaborStatsError
from labor_stats_explorer.models import (
    ALL,
    DEFAULT_STATE,
    VIEW_NATIONAL,
    VIEW_STATES,
    AcquisitionResult,
    DataPoint,
    FilterSelection,
    SeriesDescriptor,
    sort_by_recency,
)


logger = logging.getLogger(__name__)

# Series fetched for the default view, matched by name fragment
DEFAULT_VIEW_SERIES = {
    NATIONAL: ("National Unemployment Rate", "Total Nonfarm Employment"),
    INFLATION: ("Consumer Price Index", "Producer Price Index"),
}


class SeriesSource(Protocol):
    async def fetch(
        self,
        series_id: str,
        api_key: str,
        start_year: int | str = ...,
        end_year: int | str = ...,
    ) -> list[dict[str, Any]]: ...


def select_series(
    catalog: SeriesCatalog, view: str, selection: FilterSelection | None = None
) -> list[SeriesDescriptor]:
    """Descriptors to fetch for a view.

    - national: every National and Inflation series
    - states: every series named after the selected state (Florida by default)
    - anything else: headline national and inflation series plus Florida
    """
    if view == VIEW_NATIONAL:
        return catalog.by_category(NATIONAL, INFLATION)

    if view == VIEW_STATES:
        state = selection.subcategory if selection else ""
        if not state or state == ALL:
            state = DEFAULT_STATE
        series = catalog.for_state(state)
        if not series:
            logger.warning(f"No series found for state: {state}")
        return series

    headline = [
        d
        for d in catalog.by_category(NATIONAL, INFLATION)
        if any(fragment in d.name for fragment in DEFAULT_VIEW_SERIES[d.category])
    ]
    florida = [d for d in catalog.for_state(DEFAULT_STATE) if d.category == STATE_DATA]
    return headline + florida


class DataAcquisition:
    """Runs one fetch cycle over the series a view needs.

    Series are fetched one after another. A failing series becomes a
    diagnostic message and the loop carries on.
    """

    def __init__(
        self,
        fetcher: SeriesSource,
        settings: Settings | None = None,
        catalog: SeriesCatalog | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.settings = settings or Settings()
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    async def acquire(
        self, view: str, selection: FilterSelection | None = None
    ) -> AcquisitionResult:
        """
        Fetch and normalize every series selected for the view.

        Args:
            view: "all", "national" or "states"
            selection: Current filter selection; only subcategory is read

        Returns:
            AcquisitionResult with records sorted most recent first and
            the per-series diagnostics

        Raises:
            ConfigError: No API key configured, before any request is made
            AcquisitionError: Every attempted series failed
        """
        self.settings.validate()

        series_to_fetch = select_series(self.catalog, view, selection)
        logger.info(f"Fetching {len(series_to_fetch)} series for view '{view}'")

        records: list[DataPoint] = []
        diagnostics: list[str] = []

        for descriptor in series_to_fetch:
            try:
                observations = await self.fetcher.fetch(
                    descriptor.id,
                    self.settings.bls_api_key,
                    self.settings.start_year,
                    self.settings.end_year,
                )
                points = [DataPoint.from_observation(descriptor, raw) for raw in observations]
            except LaborStatsError as e:
                logger.warning(f"Error fetching {descriptor.id}: {e}")
                diagnostics.append(f"Failed to fetch {descriptor.name}: {e}")
                continue
            except Exception as e:
                logger.exception(f"Unexpected error fetching {descriptor.id}")
                diagnostics.append(f"Failed to fetch {descriptor.name}: {e}")
                continue

            logger.info(f"  {descriptor.id}: {len(points)} observations")
            records.extend(points)

        if diagnostics:
            logger.warning(f"Failed to fetch {len(diagnostics)} of {len(series_to_fetch)} series")

        if not records and diagnostics:
            raise AcquisitionError(
                "No data fetched successfully. See details below.", diagnostics
            )

        return AcquisitionResult(
            records=tuple(sort_by_recency(records)),
            diagnostics=tuple(diagnostics),
        )
