"""In-memory state for the explorer: latest records, diagnostics, error."""

import logging

from labor_stats_explorer.data.acquisition import DataAcquisition
from labor_stats_explorer.errors import AcquisitionError, ConfigError
from labor_stats_explorer.models import DataPoint, FilterSelection


logger = logging.getLogger(__name__)


class ExplorerStore:
    """Holds the outcome of the most recent fetch cycle.

    Each refresh gets a generation number. When a cycle finishes after a
    newer one has started, its outcome is dropped so older data never
    overwrites fresher data. State is replaced as whole values.
    """

    def __init__(self, acquisition: DataAcquisition) -> None:
        self.acquisition = acquisition
        self.records: tuple[DataPoint, ...] = ()
        self.diagnostics: tuple[str, ...] = ()
        self.error: str | None = None
        self.loading = False
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def refresh(self, view: str, selection: FilterSelection | None = None) -> bool:
        """Run a fetch cycle. Returns False if the result was superseded."""
        self._generation += 1
        generation = self._generation
        self.loading = True

        records: tuple[DataPoint, ...] = ()
        diagnostics: tuple[str, ...] = ()
        error: str | None = None

        try:
            result = await self.acquisition.acquire(view, selection)
            records, diagnostics = result.records, result.diagnostics
        except AcquisitionError as e:
            error = f"Failed to fetch BLS data: {e}"
            diagnostics = tuple(e.diagnostics)
            logger.error(error)
        except ConfigError as e:
            error = f"Failed to fetch BLS data: {e}"
            logger.error(error)

        if generation != self._generation:
            logger.warning(
                f"Discarding stale fetch cycle {generation} (latest is {self._generation})"
            )
            return False

        self.records = records
        self.diagnostics = diagnostics
        self.error = error
        self.loading = False
        return True

    @property
    def visible_diagnostics(self) -> tuple[str, ...]:
        """Per-series messages shown to the user: only alongside a top-level error."""
        return self.diagnostics if self.error else ()
