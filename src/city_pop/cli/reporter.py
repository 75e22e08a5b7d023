"""Render search results and failures.

Results go to stdout one line per record, in source order.  Failures are
a single line on stderr.  The line formats are part of the CLI contract
and must not change.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from city_pop.cli.console import console
from city_pop.core.models import PopulationData

FAILURE_PREFIX = "Failed to execute program -- "


def format_record(data: PopulationData) -> str:
    """``country=<country>, city=<city>, population=Some(<n>)``"""
    return f"country={data.country}, city={data.city}, population=Some({data.population})"


def print_results(results: Iterable[PopulationData], stream: TextIO | None = None) -> None:
    """Write one formatted line per record to *stream* (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    for data in results:
        print(format_record(data), file=out)


def format_failure(error: BaseException) -> str:
    """Return the single stderr line reporting *error*."""
    return f"{FAILURE_PREFIX}{error}"


def report_failure(error: BaseException) -> None:
    """Write the failure line for *error* to stderr, verbatim."""
    console.print(format_failure(error), markup=False)
