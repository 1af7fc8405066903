"""BLS Public API fetcher for single series."""

import logging
from typing import Any

import httpx

from labor_stats_explorer.config import DEFAULT_END_YEAR, DEFAULT_START_YEAR, Settings
from labor_stats_explorer.errors import ApiError, ConfigError, TransportError


logger = logging.getLogger(__name__)

REQUEST_SUCCEEDED = "REQUEST_SUCCEEDED"


class BlsFetcher:
    """Fetches one series at a time from the BLS timeseries endpoint.

    A single attempt per call. Retrying is left to callers.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close HTTP client if we created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BlsFetcher":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def fetch(
        self,
        series_id: str,
        api_key: str,
        start_year: int | str = DEFAULT_START_YEAR,
        end_year: int | str = DEFAULT_END_YEAR,
    ) -> list[dict[str, Any]]:
        """
        Fetch raw observations for one series.

        Args:
            series_id: BLS series ID
            api_key: BLS registration key
            start_year: First year requested (inclusive)
            end_year: Last year requested (inclusive)

        Returns:
            Observation dicts (year, period, periodName, value, footnotes)
            in the order BLS returns them
        """
        if not series_id:
            raise ConfigError("Series ID is required")
        if not api_key:
            raise ConfigError("API key is required")

        logger.info(f"Fetching {series_id} ({start_year}-{end_year})...")

        try:
            response = await self.client.get(
                f"{self.settings.base_url}{series_id}",
                params={
                    "registrationkey": api_key,
                    "startyear": str(start_year),
                    "endyear": str(end_year),
                },
            )
        except httpx.RequestError as e:
            raise TransportError(f"Network error: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON in response for {series_id}") from e

        return _extract_observations(payload, series_id)


def _extract_observations(payload: Any, series_id: str) -> list[dict[str, Any]]:
    """Validate a BLS response body and return the first series' data list."""
    if not isinstance(payload, dict):
        raise ApiError(f"Unexpected response body for {series_id}")

    status = payload.get("status")
    if status and status != REQUEST_SUCCEEDED:
        message = payload.get("message")
        if isinstance(message, list):
            message = "; ".join(str(m) for m in message)
        raise ApiError(f"API error: {message or 'Request failed'}")

    results = payload.get("Results")
    series_list = results.get("series") if isinstance(results, dict) else None
    if not series_list or not isinstance(series_list, list):
        raise ApiError(f"No series data returned for {series_id}")

    data = series_list[0].get("data") if isinstance(series_list[0], dict) else None
    if not data or not isinstance(data, list):
        raise ApiError(f"No data points found for {series_id}")

    return data
