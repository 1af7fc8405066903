"""Explorer for BLS labor statistics time series."""

__version__ = "0.1.0"
