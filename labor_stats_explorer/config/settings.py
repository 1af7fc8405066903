"""Configuration settings for the explorer."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

from labor_stats_explorer.errors import ConfigError


load_dotenv()


# BLS public API v2, series id is appended to the path
BLS_API_BASE_URL = "https://api.bls.gov/publicAPI/v2/timeseries/data/"

# Default year window requested for every series
DEFAULT_START_YEAR = 2015
DEFAULT_END_YEAR = 2025


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class Settings:
    """Application settings."""

    bls_api_key: str = field(default_factory=lambda: os.getenv("BLS_API_KEY", ""))
    base_url: str = field(
        default_factory=lambda: os.getenv("BLS_API_BASE_URL", BLS_API_BASE_URL)
    )
    start_year: int = field(
        default_factory=lambda: _env_int("BLS_START_YEAR", DEFAULT_START_YEAR)
    )
    end_year: int = field(
        default_factory=lambda: _env_int("BLS_END_YEAR", DEFAULT_END_YEAR)
    )
    timeout: float = field(default_factory=lambda: float(_env_int("BLS_TIMEOUT", 30)))

    def validate(self) -> None:
        """Validate required settings."""
        if not self.bls_api_key:
            raise ConfigError(
                "BLS API key is not set. Define BLS_API_KEY in your .env file. "
                "Register at: https://data.bls.gov/registrationEngine/"
            )
        if self.start_year > self.end_year:
            raise ConfigError(
                f"start year {self.start_year} is after end year {self.end_year}"
            )

    def has_api_key(self) -> bool:
        """Check if a BLS API key is configured."""
        return bool(self.bls_api_key)
