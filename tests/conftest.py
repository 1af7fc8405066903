import pytest

from labor_stats_explorer.config import Settings
from labor_stats_explorer.errors import ApiError, TransportError
from labor_stats_explorer.models import DataPoint


def _make_point(
    name="National Unemployment Rate",
    year="2024",
    period="M01",
    value="4.0",
    series_id=None,
    category="National",
    period_name=None,
):
    return DataPoint(
        id=series_id or name.replace(" ", "_").upper(),
        name=name,
        category=category,
        subcategory=None,
        unit="Percent",
        year=year,
        period=period,
        period_name=period_name or f"Month {period[1:]}",
        value=value,
    )


def _observation(year="2024", period="M01", value="4.0"):
    return {
        "year": year,
        "period": period,
        "periodName": "January",
        "value": value,
        "footnotes": [{}],
    }


class FakeFetcher:
    """Returns canned observations per series id; failures raise the given error."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    async def fetch(self, series_id, api_key, start_year=2015, end_year=2025):
        self.calls.append(series_id)
        response = self.responses.get(series_id)
        if response is None:
            raise ApiError(f"No series data returned for {series_id}")
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture()
def make_point():
    return _make_point


@pytest.fixture()
def observation():
    return _observation


@pytest.fixture()
def fake_fetcher():
    return FakeFetcher


@pytest.fixture()
def settings():
    return Settings(bls_api_key="test-key", base_url="https://bls.test/data/")


@pytest.fixture()
def transport_error():
    return TransportError("HTTP error! status: 500", status_code=500)
