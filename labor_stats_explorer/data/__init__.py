"""Data fetching and fetch-cycle state."""

from .bls_fetcher import BlsFetcher
from .acquisition import DataAcquisition, select_series
from .store import ExplorerStore

__all__ = ["BlsFetcher", "DataAcquisition", "ExplorerStore", "select_series"]
