"""Infrastructure layer — file, stream and CSV handling.

Every raw ``OSError``, ``csv.Error`` and ``UnicodeDecodeError`` is
caught here and re-raised as a
:class:`~city_pop.exceptions.CityPopError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from city_pop.infra.csv_decoder import decode_rows, parse_population
from city_pop.infra.csv_provider import CsvRowProvider
from city_pop.infra.row_source import open_source

__all__: list[str] = [
    "CsvRowProvider",
    "decode_rows",
    "open_source",
    "parse_population",
]
