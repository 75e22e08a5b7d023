"""Tests for the row source (infra/row_source.py)."""

from __future__ import annotations

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from city_pop.exceptions import InputReadError
from city_pop.infra.row_source import open_source


class TestOpenFile:
    def test_reads_file_bytes(self, write_csv: Callable[[str | bytes], Path]) -> None:
        path = write_csv(b"Country,City,Population\n")
        with open_source(path) as stream:
            assert stream.read() == b"Country,City,Population\n"

    def test_closes_file_on_exit(self, write_csv: Callable[[str | bytes], Path]) -> None:
        path = write_csv("x")
        with open_source(path) as stream:
            pass
        assert stream.closed

    def test_closes_file_on_error(self, write_csv: Callable[[str | bytes], Path]) -> None:
        path = write_csv("x")
        with pytest.raises(RuntimeError):
            with open_source(path) as stream:
                raise RuntimeError("boom")
        assert stream.closed

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.csv"
        with pytest.raises(InputReadError, match="nope.csv") as exc_info:
            with open_source(missing):
                pass
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(InputReadError) as exc_info:
            with open_source(tmp_path):
                pass
        assert isinstance(exc_info.value.__cause__, OSError)


class TestStdin:
    def test_none_reads_stdin(self, fake_stdin: Callable[[str | bytes], io.BytesIO]) -> None:
        fake_stdin("a,b\n")
        with open_source(None) as stream:
            assert stream.read() == b"a,b\n"

    def test_stdin_left_open(self, fake_stdin: Callable[[str | bytes], io.BytesIO]) -> None:
        buffer = fake_stdin("a,b\n")
        with open_source(None) as stream:
            assert stream is sys.stdin.buffer
        assert not buffer.closed
