"""Infrastructure: decode a CSV byte stream into :class:`Row` values.

The decoder is a generator — lazy, forward-only and single-pass.  It
consumes the stream destructively and stops at the first malformed
record; there is no skip-and-continue mode.

Format
------
* UTF-8 text; a leading byte-order mark is ignored.
* The first non-blank record is the header.  ``Country`` and ``City``
  must be present (compared case-insensitively); ``Population`` may be
  missing, in which case no row has a population.  Other columns are
  ignored.
* Cells have no size limit.
* Every later non-blank record has exactly as many fields as the header.
* ``Population`` is optional per row: anything other than an unsigned
  64-bit decimal integer decodes as ``None``.
"""

from __future__ import annotations

import csv
import io
import logging
import sys
from collections.abc import Iterator
from typing import BinaryIO

from city_pop.core.models import Row
from city_pop.exceptions import CsvDecodeError, InputReadError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = ("Country", "City")
OPTIONAL_COLUMN: str = "Population"

_POPULATION_MAX: int = 2**64 - 1

# Largest value csv.field_size_limit accepts on every platform (a C long).
_FIELD_SIZE_LIMIT: int = min(sys.maxsize, 2**31 - 1)


def parse_population(cell: str) -> int | None:
    """Parse a population cell, returning ``None`` when it is not a count.

    Accepts ASCII digits with an optional leading ``+``.  Empty cells,
    signs other than ``+``, whitespace, decimals and values beyond the
    unsigned 64-bit range all yield ``None``.
    """
    digits = cell[1:] if cell.startswith("+") else cell
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    if value > _POPULATION_MAX:
        return None
    return value


def _column_positions(header: list[str], line: int) -> tuple[int, int, int | None]:
    """Locate the columns, first occurrence winning.

    ``Population`` is optional: without it every row has no population.
    """
    positions: dict[str, int] = {}
    for index, name in enumerate(header):
        positions.setdefault(name.casefold(), index)

    for column in REQUIRED_COLUMNS:
        if column.casefold() not in positions:
            raise CsvDecodeError(f"missing field `{column}`", line=line)

    return (
        positions[REQUIRED_COLUMNS[0].casefold()],
        positions[REQUIRED_COLUMNS[1].casefold()],
        positions.get(OPTIONAL_COLUMN.casefold()),
    )


def _decode_text(text: io.TextIOBase) -> Iterator[Row]:
    csv.field_size_limit(_FIELD_SIZE_LIMIT)
    reader = csv.reader(text, strict=True)
    try:
        header = next((record for record in reader if record), None)
        if header is None:
            logger.debug("Input is empty; no header found")
            return

        country_at, city_at, population_at = _column_positions(header, reader.line_num)
        width = len(header)
        logger.debug("Header %r has %d field(s)", header, width)

        decoded = 0
        for record in reader:
            if not record:
                continue
            if len(record) != width:
                raise CsvDecodeError(
                    f"found record with {len(record)} fields, "
                    f"but the previous record has {width} fields",
                    line=reader.line_num,
                )
            decoded += 1
            yield Row(
                country=record[country_at],
                city=record[city_at],
                population=(
                    None if population_at is None else parse_population(record[population_at])
                ),
            )
    except csv.Error as exc:
        raise CsvDecodeError(str(exc), line=reader.line_num) from exc
    except UnicodeDecodeError as exc:
        raise CsvDecodeError(f"invalid UTF-8 data: {exc.reason}") from exc
    except OSError as exc:
        raise InputReadError(str(exc)) from exc

    logger.debug("Decoded %d record(s)", decoded)


def decode_rows(stream: BinaryIO) -> Iterator[Row]:
    """Yield :class:`Row` values decoded from the byte *stream*.

    The stream itself is left open; closing it is the caller's job.

    Raises
    ------
    CsvDecodeError
        On the first record that breaks the CSV grammar or the schema,
        or on invalid UTF-8.
    InputReadError
        When reading the underlying stream fails.
    """
    text = io.TextIOWrapper(stream, encoding="utf-8-sig", newline="")
    try:
        yield from _decode_text(text)
    finally:
        # Detach so the wrapper never closes a stream it does not own.
        text.detach()
