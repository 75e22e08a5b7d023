"""CSV file backed implementation of :class:`~city_pop.core.protocols.RowProvider`."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from city_pop.core.models import Row
from city_pop.infra.csv_decoder import decode_rows
from city_pop.infra.row_source import open_source


class CsvRowProvider:
    """Concrete :class:`RowProvider` reading CSV from a file or stdin.

    Usage::

        provider = CsvRowProvider()
        for row in provider.iter_rows(Path("cities.csv")):
            ...

    Nothing is opened until the first row is requested.  The file is
    closed once the iterator is exhausted, fails or is closed.
    """

    def iter_rows(self, data_path: Path | None) -> Iterator[Row]:
        with open_source(data_path) as stream:
            yield from decode_rows(stream)
