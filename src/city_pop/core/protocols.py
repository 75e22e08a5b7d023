"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from city_pop.core.models import Row


class RowProvider(Protocol):
    """Contract for population record backends.

    Any object that implements :meth:`iter_rows` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def iter_rows(self, data_path: Path | None) -> Iterator[Row]:
        """Yield decoded rows from *data_path*, or stdin when ``None``.

        The iterator is lazy, forward-only and single-pass.  Any
        resource it opens must be released when the iterator is
        exhausted or closed.

        Raises
        ------
        InputReadError
            When the source cannot be opened or read.
        CsvDecodeError
            When a record violates the CSV grammar or schema.  Decoding
            stops at the first such record.
        """
        ...  # pragma: no cover
