"""Known BLS series: national indicators, inflation and per-state labor data.

State series follow the BLS id layouts:
- LASST{fips}0000000000003: LAUS unemployment rate, seasonally adjusted
- SMS{fips}000000000000001: CES state total nonfarm employment, seasonally adjusted
"""

from collections.abc import Iterator

from labor_stats_explorer.models.series import SeriesDescriptor


NATIONAL = "National"
INFLATION = "Inflation"
STATE_DATA = "State Data"

UNEMPLOYMENT_RATE_SUFFIX = " Unemployment Rate"
NONFARM_EMPLOYMENT_SUFFIX = " Total Nonfarm Employment"


NATIONAL_SERIES: tuple[SeriesDescriptor, ...] = (
    SeriesDescriptor("LNS14000000", "National Unemployment Rate", NATIONAL, "Unemployment", "Percent"),
    SeriesDescriptor("CES0000000001", "Total Nonfarm Employment", NATIONAL, "Employment", "Thousands of jobs"),
    SeriesDescriptor("LNS11300000", "Labor Force Participation Rate", NATIONAL, "Labor Force", "Percent"),
    SeriesDescriptor("CES0500000003", "Average Hourly Earnings", NATIONAL, "Earnings", "Dollars per hour"),
    SeriesDescriptor("CUUR0000SA0", "Consumer Price Index (CPI-U)", INFLATION, "Consumer Prices", "Index 1982-84=100"),
    SeriesDescriptor("CUUR0000SA0L1E", "Core CPI (All Items Less Food and Energy)", INFLATION, "Consumer Prices", "Index 1982-84=100"),
    SeriesDescriptor("WPUFD4", "Producer Price Index (Final Demand)", INFLATION, "Producer Prices", "Index Nov 2009=100"),
)

# State name -> FIPS code
STATE_FIPS: dict[str, str] = {
    "Alabama": "01",
    "Alaska": "02",
    "Arizona": "04",
    "Arkansas": "05",
    "California": "06",
    "Colorado": "08",
    "Connecticut": "09",
    "Delaware": "10",
    "District of Columbia": "11",
    "Florida": "12",
    "Georgia": "13",
    "Hawaii": "15",
    "Idaho": "16",
    "Illinois": "17",
    "Indiana": "18",
    "Iowa": "19",
    "Kansas": "20",
    "Kentucky": "21",
    "Louisiana": "22",
    "Maine": "23",
    "Maryland": "24",
    "Massachusetts": "25",
    "Michigan": "26",
    "Minnesota": "27",
    "Mississippi": "28",
    "Missouri": "29",
    "Montana": "30",
    "Nebraska": "31",
    "Nevada": "32",
    "New Hampshire": "33",
    "New Jersey": "34",
    "New Mexico": "35",
    "New York": "36",
    "North Carolina": "37",
    "North Dakota": "38",
    "Ohio": "39",
    "Oklahoma": "40",
    "Oregon": "41",
    "Pennsylvania": "42",
    "Rhode Island": "44",
    "South Carolina": "45",
    "South Dakota": "46",
    "Tennessee": "47",
    "Texas": "48",
    "Utah": "49",
    "Vermont": "50",
    "Virginia": "51",
    "Washington": "53",
    "West Virginia": "54",
    "Wisconsin": "55",
    "Wyoming": "56",
}


def _state_series(state: str, fips: str) -> tuple[SeriesDescriptor, SeriesDescriptor]:
    return (
        SeriesDescriptor(
            f"LASST{fips}{'0' * 11}03",
            f"{state}{UNEMPLOYMENT_RATE_SUFFIX}",
            STATE_DATA,
            state,
            "Percent",
        ),
        SeriesDescriptor(
            f"SMS{fips}{'0' * 13}01",
            f"{state}{NONFARM_EMPLOYMENT_SUFFIX}",
            STATE_DATA,
            state,
            "Thousands of jobs",
        ),
    )


STATE_SERIES: tuple[SeriesDescriptor, ...] = tuple(
    descriptor
    for state, fips in STATE_FIPS.items()
    for descriptor in _state_series(state, fips)
)


class SeriesCatalog:
    """Read-only lookup over a fixed set of series descriptors."""

    def __init__(self, descriptors: tuple[SeriesDescriptor, ...] | list[SeriesDescriptor]) -> None:
        self._descriptors = tuple(descriptors)
        self._by_id: dict[str, SeriesDescriptor] = {}
        names: set[str] = set()

        for descriptor in self._descriptors:
            if descriptor.id in self._by_id:
                raise ValueError(f"Duplicate series id: {descriptor.id}")
            if descriptor.name in names:
                raise ValueError(f"Duplicate series name: {descriptor.name}")
            self._by_id[descriptor.id] = descriptor
            names.add(descriptor.name)

    def __iter__(self) -> Iterator[SeriesDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, series_id: object) -> bool:
        return series_id in self._by_id

    def get(self, series_id: str) -> SeriesDescriptor | None:
        """Look up a descriptor by BLS series id."""
        return self._by_id.get(series_id)

    def by_category(self, *categories: str) -> list[SeriesDescriptor]:
        """Descriptors in any of the given categories, in catalog order."""
        return [d for d in self._descriptors if d.category in categories]

    def for_state(self, state: str) -> list[SeriesDescriptor]:
        """Descriptors whose name starts with the given state name."""
        return [d for d in self._descriptors if d.name.startswith(state)]

    def state_names(self) -> list[str]:
        """Sorted state names that have an unemployment rate series."""
        return sorted(
            {
                d.name[: -len(UNEMPLOYMENT_RATE_SUFFIX)]
                for d in self._descriptors
                if d.category == STATE_DATA and d.name.endswith(UNEMPLOYMENT_RATE_SUFFIX)
            }
        )


DEFAULT_CATALOG = SeriesCatalog(NATIONAL_SERIES + STATE_SERIES)
