"""city-pop — look up city population records in a CSV file.

A single streaming pass over the input with a strict layered
architecture (cli → core ← infra).
"""

from city_pop.version import __version__

__all__: list[str] = ["__version__"]
