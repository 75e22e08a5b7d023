"""CLI application entry point for city-pop.

Runs the pipeline Argument Parser → Row Source → CSV Decoder →
Filter & Collector → Reporter.

Architecture notes
------------------
* No business logic lives here — the search is delegated to
  :class:`~city_pop.core.search_service.PopulationSearchService` backed by
  :class:`~city_pop.infra.csv_provider.CsvRowProvider`.
* :func:`cli` is the **sole error boundary**: it turns
  :class:`~city_pop.exceptions.CityPopError`, ``KeyboardInterrupt`` and
  any unexpected ``Exception`` into a stderr line and an exit code.
* Quiet mode is decided in :func:`main`, the only place that knows the
  parsed options.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from city_pop.cli import exit_codes
from city_pop.cli.console import configure_logging, console
from city_pop.cli.reporter import print_results, report_failure
from city_pop.core.models import Configuration
from city_pop.core.search_service import PopulationSearchService
from city_pop.exceptions import CityPopError, NotFoundError
from city_pop.infra.csv_provider import CsvRowProvider
from city_pop.version import __version__

logger = logging.getLogger(__name__)

USAGE = """%(prog)s [options] [<data-path>] <city>
       %(prog)s --help"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    ``--help`` and malformed arguments terminate the process from inside
    :meth:`~argparse.ArgumentParser.parse_args`, before any input is
    opened.
    """
    parser = argparse.ArgumentParser(
        prog="city-pop",
        usage=USAGE,
        description="Print the population records of a city from CSV data.",
        add_help=False,
    )
    parser.add_argument(
        "data_path",
        nargs="?",
        default=None,
        type=Path,
        metavar="data-path",
        help="CSV file to read (default: standard input).",
    )
    parser.add_argument(
        "city",
        help="City name to look up (exact, case-sensitive).",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        help="Show this usage message.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Don't show noisy messages.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug diagnostics on stderr.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_configuration(argv: list[str] | None = None) -> Configuration:
    """Parse *argv* into a :class:`Configuration` or exit the process."""
    args = _build_parser().parse_args(argv)
    return Configuration(
        data_path=args.data_path,
        city=args.city,
        quiet=args.quiet,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the city-pop CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    CityPopError
        Any failure other than a quiet-mode :class:`NotFoundError`; the
        caller (:func:`cli`) renders it.
    """
    config = parse_configuration(argv)
    configure_logging(config.verbose)
    logger.debug("Configuration: %r", config)

    service = PopulationSearchService(CsvRowProvider())
    try:
        results = service.search(config.data_path, config.city)
    except NotFoundError:
        if config.quiet:
            return exit_codes.GENERAL_ERROR
        raise

    print_results(results)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CityPopError as exc:
        report_failure(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            markup=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
