"""Exception types raised by the acquisition pipeline."""


class LaborStatsError(Exception):
    """Base class for explorer errors."""


class ConfigError(LaborStatsError, ValueError):
    """Missing credential or series id. Fatal for a whole acquisition."""


class TransportError(LaborStatsError):
    """The HTTP layer failed or returned a non-success status for one series."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiError(LaborStatsError):
    """The BLS response body was unsuccessful or had no series data."""


class AcquisitionError(LaborStatsError):
    """No records were obtained across all attempted series."""

    def __init__(self, message: str, diagnostics: list[str] | None = None) -> None:
        super().__init__(message)
        self.diagnostics = list(diagnostics or [])
