"""Pure filtering and collection of population records.

Every function in this module is a **pure** transformation over an
iterable of rows — no I/O and no side effects beyond consuming the
iterable.  Source order is preserved; nothing is deduplicated, sorted
or aggregated.
"""

from __future__ import annotations

from collections.abc import Iterable

from city_pop.core.models import PopulationData, Row
from city_pop.exceptions import NotFoundError


def is_match(row: Row, city: str) -> bool:
    """Return ``True`` when *row* has a population and names *city* exactly."""
    return row.population is not None and row.city == city


def collect_matches(rows: Iterable[Row], city: str) -> list[PopulationData]:
    """Consume *rows* once and return every match in source order.

    Raises
    ------
    NotFoundError
        When no row matches, so a returned list is never empty.
    """
    matches = [PopulationData.from_row(row) for row in rows if is_match(row, city)]
    if not matches:
        raise NotFoundError()
    return matches
