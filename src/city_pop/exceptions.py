"""Custom exception hierarchy for city-pop.

All exceptions that cross layer boundaries must inherit from
:class:`CityPopError`.  Raw ``OSError``, ``csv.Error`` and
``UnicodeDecodeError`` must NEVER propagate beyond the infrastructure
layer — they are caught there and re-raised (``from`` the original) as
a typed subclass defined here.

Hierarchy
---------
CityPopError
├── InputReadError
├── CsvDecodeError
└── NotFoundError
"""

from __future__ import annotations


class CityPopError(Exception):
    """Base exception for all city-pop errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a single clean
    line without leaking stack traces.
    """


# --- Input -----------------------------------------------------------------

class InputReadError(CityPopError):
    """Raised when the data source cannot be opened or read.

    The message is the text of the underlying ``OSError``, which is
    also available as ``__cause__``.
    """


# --- Decoding --------------------------------------------------------------

class CsvDecodeError(CityPopError):
    """Raised when the input violates the CSV grammar or the row schema."""

    def __init__(self, detail: str, *, line: int | None = None) -> None:
        if line is None:
            message = f"CSV error: {detail}"
        else:
            message = f"CSV error: line {line}: {detail}"
        super().__init__(message)
        self.detail: str = detail
        """Parser diagnostic without the location prefix."""
        self.line: int | None = line
        """1-based input line the failure was detected on, if known."""


# --- Lookup ----------------------------------------------------------------

class NotFoundError(CityPopError):
    """Raised when no record matches the requested city."""

    MESSAGE = "No match found for given city"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)
