"""CLI console and logging helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and plain error output keep working when it is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console() -> Any | None:
	"""Create a Rich console targeting stderr, if Rich is available."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=True, highlight=False, emoji=False, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible stderr proxy with Rich fallback."""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stderr print."""
		rich_console = get_rich_console()
		if rich_console is None:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()


def configure_logging(verbose: bool = False) -> None:
	"""Route the package's log records to stderr.

	WARNING and above by default, everything with *verbose*.  Uses
	``rich.logging.RichHandler`` when Rich is installed.
	"""
	level = logging.DEBUG if verbose else logging.WARNING
	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
	else:
		handler = RichHandler(console=get_rich_console(), show_path=False)
	package_logger = logging.getLogger("city_pop")
	for existing in list(package_logger.handlers):
		package_logger.removeHandler(existing)
	package_logger.addHandler(handler)
	package_logger.setLevel(level)
	package_logger.propagate = False
