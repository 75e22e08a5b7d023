"""Shared pytest fixtures and configuration for the city-pop test suite.

Guidelines
----------
* No network access in any test.
* Files are only created under ``tmp_path``.
* Core tests must be pure — providers are mocked at the protocol boundary.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_CSV = (
    "Country,City,Population\n"
    "Japan,Tokyo,13960000\n"
    "Japan,Osaka,\n"
    "USA,Tokyo,\n"
)


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str | bytes], Path]:
    """Return a helper that writes CSV content to a fresh file."""
    counter = iter(range(1_000))

    def _write(content: str | bytes) -> Path:
        path = tmp_path / f"data_{next(counter)}.csv"
        if isinstance(content, str):
            path.write_bytes(content.encode("utf-8"))
        else:
            path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv: Callable[[str | bytes], Path]) -> Path:
    return write_csv(SAMPLE_CSV)


@pytest.fixture
def fake_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str | bytes], io.BytesIO]:
    """Return a helper that replaces ``sys.stdin`` with the given content."""

    def _install(content: str | bytes) -> io.BytesIO:
        raw = content.encode("utf-8") if isinstance(content, str) else content
        buffer = io.BytesIO(raw)
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(buffer, encoding="utf-8"))
        return buffer

    return _install
