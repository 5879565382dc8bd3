"""
Tests for collection statistics.
"""

import math

import pytest

from memsizer.exceptions import EmptyCollectionError
from memsizer.services.estimation.statistics import summarize


def test_median_uses_upper_middle_for_even_counts() -> None:
    stats = summarize([40, 10, 30, 20])

    assert stats.median == 30


def test_median_for_odd_counts() -> None:
    assert summarize([5, 1, 3]).median == 3


def test_totals_average_and_extremes() -> None:
    values = [12, 7, 30, 7, 4]
    stats = summarize(values)

    assert stats.total == sum(values)
    assert stats.average == pytest.approx(sum(values) / len(values))
    assert stats.lowest == min(values)
    assert stats.highest == max(values)
    assert stats.per_document == tuple(values)
    assert stats.document_count == 5


def test_population_standard_deviation() -> None:
    values = [2, 4, 4, 4, 5, 5, 7, 9]

    assert summarize(values).standard_deviation == pytest.approx(2.0)


def test_identical_estimates_have_zero_deviation() -> None:
    assert summarize([17, 17, 17]).standard_deviation == 0


def test_single_document() -> None:
    stats = summarize([9])

    assert stats.median == 9
    assert stats.lowest == stats.highest == 9
    assert stats.standard_deviation == 0


def test_float_estimates_are_finite() -> None:
    stats = summarize([0.5, 1.5, 2.5])

    assert math.isfinite(stats.average)
    assert stats.total == pytest.approx(4.5)


def test_empty_input_raises() -> None:
    with pytest.raises(EmptyCollectionError) as exc_info:
        summarize([], "empty")

    assert exc_info.value.details == {"collection": "empty"}


def test_stats_are_immutable() -> None:
    stats = summarize([1, 2])

    with pytest.raises(Exception):
        stats.total = 0
