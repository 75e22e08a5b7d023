"""Infrastructure: open the byte stream records are read from.

Rules
-----
* A named file is opened in binary mode and closed on exit.
* Standard input is handed out as-is and never closed.
* ``OSError`` is mapped to :class:`~city_pop.exceptions.InputReadError`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from city_pop.exceptions import InputReadError

logger = logging.getLogger(__name__)


@contextmanager
def open_source(data_path: Path | None) -> Iterator[BinaryIO]:
    """Yield a readable byte stream for *data_path*, or stdin when ``None``.

    Raises
    ------
    InputReadError
        When the file cannot be opened (missing, permission denied,
        a directory, ...).
    """
    if data_path is None:
        logger.debug("Reading records from standard input")
        yield sys.stdin.buffer
        return

    try:
        stream = open(data_path, "rb")
    except OSError as exc:
        raise InputReadError(str(exc)) from exc

    logger.debug("Reading records from %s", data_path)
    with stream:
        yield stream
