"""Tests for the pure filter and collector (core/population_filter.py)."""

from __future__ import annotations

import pytest

from city_pop.core.models import PopulationData, Row
from city_pop.core.population_filter import collect_matches, is_match
from city_pop.exceptions import NotFoundError


def _rows() -> list[Row]:
    return [
        Row("Japan", "Tokyo", 13960000),
        Row("Japan", "Osaka", None),
        Row("USA", "Tokyo", None),
        Row("Brazil", "Tokyo", 10),
        Row("Japan", "tokyo", 99),
    ]


class TestIsMatch:
    def test_city_and_population(self) -> None:
        assert is_match(Row("Japan", "Tokyo", 1), "Tokyo")

    def test_zero_population_matches(self) -> None:
        assert is_match(Row("Japan", "Tokyo", 0), "Tokyo")

    def test_missing_population_never_matches(self) -> None:
        assert not is_match(Row("USA", "Tokyo", None), "Tokyo")

    @pytest.mark.parametrize("city", ["tokyo", "TOKYO", " Tokyo", "Tokyo ", "Toky"])
    def test_match_is_exact(self, city: str) -> None:
        assert not is_match(Row("Japan", "Tokyo", 1), city)


class TestCollectMatches:
    def test_preserves_source_order(self) -> None:
        result = collect_matches(_rows(), "Tokyo")
        assert result == [
            PopulationData("Japan", "Tokyo", 13960000),
            PopulationData("Brazil", "Tokyo", 10),
        ]

    def test_keeps_duplicates(self) -> None:
        rows = [Row("Japan", "Tokyo", 1), Row("Japan", "Tokyo", 1)]
        assert len(collect_matches(rows, "Tokyo")) == 2

    def test_case_sensitive(self) -> None:
        assert collect_matches(_rows(), "tokyo") == [PopulationData("Japan", "tokyo", 99)]

    def test_no_match_raises(self) -> None:
        with pytest.raises(NotFoundError):
            collect_matches(_rows(), "Nagoya")

    def test_only_empty_populations_raises(self) -> None:
        with pytest.raises(NotFoundError):
            collect_matches(_rows(), "Osaka")

    def test_empty_input_raises(self) -> None:
        with pytest.raises(NotFoundError):
            collect_matches([], "Tokyo")

    def test_consumes_iterator_once(self) -> None:
        rows = iter(_rows())
        collect_matches(rows, "Tokyo")
        assert next(rows, None) is None
