"""Core search service — runs one population lookup.

Depends on a :class:`~city_pop.core.protocols.RowProvider` injected at
construction time, keeping the core free of any file or CSV handling.

Guarantees
----------
* Pure orchestration — no I/O of its own, no ``print()``.
* Only :class:`~city_pop.exceptions.CityPopError` subclasses escape
  from a conforming provider.
* Stateless: the same input and query always give the same result.
"""

from __future__ import annotations

import logging
from pathlib import Path

from city_pop.core.models import PopulationData
from city_pop.core.population_filter import collect_matches
from city_pop.core.protocols import RowProvider

logger = logging.getLogger(__name__)


class PopulationSearchService:
    """Stateless service that finds the population records for a city.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`RowProvider` protocol.
    """

    def __init__(self, provider: RowProvider) -> None:
        self._provider: RowProvider = provider

    def search(self, data_path: Path | None, city: str) -> list[PopulationData]:
        """Return the records for *city* in source order.

        The provider's iterator is always closed before returning, so
        an opened file is released even when decoding aborts.

        Raises
        ------
        InputReadError
            If the source cannot be opened or read.
        CsvDecodeError
            If the input is malformed.  No partial results are returned.
        NotFoundError
            If no record matches.
        """
        rows = self._provider.iter_rows(data_path)
        try:
            results = collect_matches(rows, city)
        finally:
            close = getattr(rows, "close", None)
            if close is not None:
                close()

        logger.debug("Found %d record(s) for city %r", len(results), city)
        return results
