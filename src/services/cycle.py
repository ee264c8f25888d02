"""
Service module for menstrual cycle predictions.

This module projects the next period, ovulation date, fertile window and PMS
onset from the most recent cycle records.

Typical usage:
    records = store.latest(PREDICTION_WINDOW)
    result = compute_predictions(records)
    if result["status"] == "success":
        print(result["predictions"]["nextPeriod"])
"""
from typing import Any, Dict, List, Sequence
from datetime import date, timedelta
from statistics import mean

from aws_lambda_powertools import Logger

from src.models.cycle import CycleRecord
from src.services.constants import (
    MIN_CYCLES_FOR_PREDICTION,
    LUTEAL_PHASE_DAYS,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION,
    PMS_DAYS_BEFORE_PERIOD,
    INSUFFICIENT_DATA_MESSAGE,
    STATUS_SUCCESS,
    STATUS_INSUFFICIENT_DATA
)
from src.services.utils import get_duration, get_start_date, days_between, add_days, format_date

logger = Logger()

def calculate_forward_cycle_lengths(records: Sequence[CycleRecord]) -> List[int]:
    """
    Calculate signed cycle lengths over records given newest first.

    Each value is the start of the more recent record minus the start of the
    next older one. The input order is trusted as given, so unsorted input or
    shared start dates can produce zero or negative lengths.

    Args:
        records: Cycle records ordered most recent first

    Returns:
        List of len(records) - 1 cycle lengths in days
    """
    start_dates = [get_start_date(record) for record in records]
    return [
        days_between(start_dates[i - 1], start_dates[i])
        for i in range(1, len(start_dates))
    ]

def project_milestones(last_start: date, avg_cycle_length: float) -> Dict[str, Any]:
    """
    Project the next cycle milestones from the last start date.

    The average cycle length is rounded to whole days with halves going away
    from zero; every other offset is a whole number of days from the projected
    next period.

    Args:
        last_start: Start date of the most recent cycle
        avg_cycle_length: Average cycle length in days, may be fractional

    Returns:
        Dictionary with nextPeriod, ovulationDate, fertileWindow and PMSStart
        formatted as YYYY-MM-DD
    """
    next_period = add_days(last_start, avg_cycle_length)
    ovulation_date = next_period - timedelta(days=LUTEAL_PHASE_DAYS)
    fertile_window_start = ovulation_date - timedelta(days=FERTILE_DAYS_BEFORE_OVULATION)
    fertile_window_end = ovulation_date + timedelta(days=FERTILE_DAYS_AFTER_OVULATION)
    pms_start = next_period - timedelta(days=PMS_DAYS_BEFORE_PERIOD)

    return {
        "nextPeriod": format_date(next_period),
        "ovulationDate": format_date(ovulation_date),
        "fertileWindow": {
            "start": format_date(fertile_window_start),
            "end": format_date(fertile_window_end)
        },
        "PMSStart": format_date(pms_start)
    }

def compute_predictions(records: Sequence[CycleRecord]) -> Dict[str, Any]:
    """
    Predict upcoming cycle milestones from recent history.

    Callers fetch the most recent PREDICTION_WINDOW records; the calculation
    itself only requires at least MIN_CYCLES_FOR_PREDICTION records ordered
    most recent first.

    Args:
        records: Cycle records ordered most recent first

    Returns:
        Either {"status": "insufficient_data", "message": ...} or
        {"status": "success", "predictions": {...}, "averages": {...}}

    Raises:
        MalformedCycleDataError: If a record has an invalid start date or duration

    Example:
        >>> result = compute_predictions(store.latest(6))
        >>> result["predictions"]["fertileWindow"]["start"]
        '2024-03-08'
    """
    if len(records) < MIN_CYCLES_FOR_PREDICTION:
        logger.info("Not enough cycles for prediction", extra={
            "records_available": len(records),
            "records_required": MIN_CYCLES_FOR_PREDICTION
        })
        return {
            "status": STATUS_INSUFFICIENT_DATA,
            "message": INSUFFICIENT_DATA_MESSAGE
        }

    avg_duration = mean(get_duration(record) for record in records)
    cycle_lengths = calculate_forward_cycle_lengths(records)
    avg_cycle_length = mean(cycle_lengths)

    last_cycle = records[0]
    predictions = project_milestones(get_start_date(last_cycle), avg_cycle_length)

    logger.info("Calculated cycle predictions", extra={
        "records_analyzed": len(records),
        "cycle_lengths": cycle_lengths,
        "average_duration": avg_duration,
        "average_cycle_length": avg_cycle_length,
        "next_period": predictions["nextPeriod"]
    })

    return {
        "status": STATUS_SUCCESS,
        "predictions": predictions,
        "averages": {
            "duration": avg_duration,
            "cycleLength": avg_cycle_length
        }
    }
