"""
Statistics calculation service for cycle tracking data.

This module provides functionality for calculating average flow duration and
average cycle length over the full cycle history.
"""
from typing import Dict, List, Optional, Sequence
from statistics import mean
from aws_lambda_powertools import Logger
from src.models.cycle import CycleRecord
from src.services.utils import get_duration, get_start_date, sort_by_start_date, days_between

logger = Logger()

def calculate_cycle_lengths(records: Sequence[CycleRecord]) -> List[int]:
    """
    Calculate absolute day differences between chronologically adjacent cycles.

    Args:
        records: Cycle records in any order

    Returns:
        List of cycle lengths in days, one fewer than the number of records
    """
    ordered = sort_by_start_date(records)
    start_dates = [get_start_date(record) for record in ordered]
    return [
        abs(days_between(start_dates[i], start_dates[i - 1]))
        for i in range(1, len(start_dates))
    ]

def _average(values: Sequence) -> Optional[float]:
    if not values:
        return None
    return mean(values)

def compute_statistics(records: Sequence[CycleRecord]) -> Dict[str, Optional[float]]:
    """
    Calculate average duration and average cycle length.

    Args:
        records: Cycle records in any order

    Returns:
        Dictionary containing:
        - averageDuration: Mean flow duration, None when there are no records
        - averageCycleLength: Mean days between consecutive starts, None with
          fewer than two records

    Raises:
        MalformedCycleDataError: If a record has an invalid start date or duration

    Example:
        >>> stats = compute_statistics(store.list_cycles(descending=False))
        >>> print(stats["averageCycleLength"])
    """
    if not records:
        return {
            "averageDuration": None,
            "averageCycleLength": None
        }

    durations = [get_duration(record) for record in records]
    cycle_lengths = calculate_cycle_lengths(records)

    stats = {
        "averageDuration": _average(durations),
        "averageCycleLength": _average(cycle_lengths)
    }

    logger.info("Calculated cycle statistics", extra={
        "records_analyzed": len(records),
        "cycle_lengths": cycle_lengths,
        **stats
    })

    return stats
