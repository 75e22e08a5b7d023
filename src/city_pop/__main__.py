"""Allow ``python -m city_pop`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m city_pop`` behaves identically to the ``city-pop`` console
script.
"""

from __future__ import annotations

from city_pop.cli.app import cli

if __name__ == "__main__":
    cli()
