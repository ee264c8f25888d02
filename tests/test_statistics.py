"""Tests for statistics calculation service."""
from datetime import date
from itertools import permutations

import pytest
from src.models.cycle import CycleRecord
from src.services.statistics import compute_statistics, calculate_cycle_lengths
from src.services.exceptions import MalformedCycleDataError, StatisticsError
from tests.helpers import make_cycle

def test_compute_statistics_empty():
    """Test statistics with no records."""
    assert compute_statistics([]) == {
        "averageDuration": None,
        "averageCycleLength": None
    }

def test_compute_statistics_single_record():
    """Test that a single record yields a duration but no cycle length."""
    stats = compute_statistics([make_cycle(date(2024, 1, 1), 6)])

    assert stats["averageDuration"] == 6
    assert stats["averageCycleLength"] is None

def test_compute_statistics_two_records():
    """Test that two records are enough for a cycle length."""
    stats = compute_statistics([
        make_cycle(date(2024, 1, 1), 5),
        make_cycle(date(2024, 1, 31), 3)
    ])

    assert stats["averageDuration"] == 4
    assert stats["averageCycleLength"] == 30

def test_compute_statistics_regular_cycles(scenario_cycles):
    """Test averages over three regular cycles."""
    stats = compute_statistics(scenario_cycles)

    assert stats["averageDuration"] == pytest.approx(14 / 3)
    assert stats["averageCycleLength"] == 28

def test_compute_statistics_fractional_cycle_length():
    """Test that cycle length averages are not rounded."""
    stats = compute_statistics([
        make_cycle(date(2024, 1, 1)),
        make_cycle(date(2024, 1, 29)),
        make_cycle(date(2024, 2, 27))
    ])

    assert stats["averageCycleLength"] == 28.5

def test_compute_statistics_is_order_independent():
    """Test that input order does not change the result."""
    records = [
        make_cycle(date(2024, 1, 1), 5),
        make_cycle(date(2024, 1, 25), 4),
        make_cycle(date(2024, 2, 25), 6),
        make_cycle(date(2024, 3, 22), 3)
    ]
    expected = compute_statistics(records)

    assert expected["averageCycleLength"] == pytest.approx(81 / 3)
    for ordering in permutations(records):
        assert compute_statistics(list(ordering)) == expected

def test_calculate_cycle_lengths_sorts_chronologically():
    """Test that lengths are absolute differences after sorting."""
    records = [
        make_cycle(date(2024, 3, 1)),
        make_cycle(date(2024, 1, 1)),
        make_cycle(date(2024, 2, 1))
    ]

    assert calculate_cycle_lengths(records) == [31, 29]

def test_calculate_cycle_lengths_shared_start_date():
    """Test that records sharing a start date contribute a zero length."""
    records = [
        make_cycle(date(2024, 1, 29)),
        make_cycle(date(2024, 1, 1)),
        make_cycle(date(2024, 1, 29))
    ]

    assert calculate_cycle_lengths(records) == [28, 0]
    assert compute_statistics(records)["averageCycleLength"] == 14

def test_compute_statistics_does_not_mutate_input(scenario_cycles):
    """Test that the input list keeps its order."""
    original = list(scenario_cycles)
    compute_statistics(scenario_cycles)
    assert scenario_cycles == original

def test_compute_statistics_malformed_start_date():
    """Test that a non-date start date is reported, not coerced."""
    records = [
        make_cycle(date(2024, 1, 1)),
        CycleRecord.model_construct(start_date="not-a-date", duration=5)
    ]

    with pytest.raises(MalformedCycleDataError) as exc:
        compute_statistics(records)
    assert "invalid start date" in str(exc.value)

def test_compute_statistics_malformed_duration():
    """Test that a non-numeric duration raises a statistics error."""
    records = [CycleRecord.model_construct(start_date=date(2024, 1, 1), duration="five")]

    with pytest.raises(StatisticsError):
        compute_statistics(records)
