"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or stream I/O.
* No imports from ``cli`` or ``infra``.
"""

from city_pop.core.models import Configuration, PopulationData, Row
from city_pop.core.population_filter import collect_matches, is_match
from city_pop.core.protocols import RowProvider
from city_pop.core.search_service import PopulationSearchService

__all__: list[str] = [
    "Configuration",
    "PopulationData",
    "PopulationSearchService",
    "Row",
    "RowProvider",
    "collect_matches",
    "is_match",
]
