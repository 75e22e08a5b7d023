"""Domain models for city-pop.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Configuration:
    """Parsed command-line options, created once at startup."""

    data_path: Path | None
    """CSV file to read, or ``None`` to read standard input."""

    city: str
    """City name to match exactly (case-sensitive)."""

    quiet: bool = False
    """Suppress the error line when nothing matches."""

    verbose: bool = False
    """Emit debug diagnostics on stderr."""


# ---------------------------------------------------------------------------
# Decoded CSV record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Row:
    """One decoded CSV record before filtering."""

    country: str
    city: str
    population: int | None
    """Non-negative population, or ``None`` when the cell is empty or not
    an integer.  ``None`` is distinct from ``0``."""


# ---------------------------------------------------------------------------
# Search result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PopulationData:
    """A filtered record with a known population and a matching city."""

    country: str
    city: str
    population: int

    @classmethod
    def from_row(cls, row: Row) -> PopulationData:
        """Build from a :class:`Row` whose population is present.

        Raises ``ValueError`` when ``row.population`` is ``None``.
        """
        if row.population is None:
            raise ValueError("row has no population")
        return cls(country=row.country, city=row.city, population=row.population)
