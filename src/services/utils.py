"""
Shared utility functions for cycle statistics and predictions.

These helpers read the fields the calculations depend on and reject records
whose start date or duration cannot be used for date arithmetic.
"""
import math
from datetime import date, datetime, timedelta
from numbers import Real
from typing import List, Sequence

from src.models.cycle import CycleRecord
from src.services.exceptions import MalformedCycleDataError

def get_start_date(record: CycleRecord) -> date:
    """
    Return the start date of a record as a plain date.

    Raises:
        MalformedCycleDataError: If the start date is missing or not a date
    """
    start_date = getattr(record, "start_date", None)
    if isinstance(start_date, datetime):
        return start_date.date()
    if not isinstance(start_date, date):
        raise MalformedCycleDataError(
            f"Cycle {getattr(record, 'id', None)} has an invalid start date: {start_date!r}"
        )
    return start_date

def get_duration(record: CycleRecord) -> Real:
    """
    Return the flow duration of a record.

    Raises:
        MalformedCycleDataError: If the duration is missing or not numeric
    """
    duration = getattr(record, "duration", None)
    if isinstance(duration, bool) or not isinstance(duration, Real):
        raise MalformedCycleDataError(
            f"Cycle {getattr(record, 'id', None)} has an invalid duration: {duration!r}"
        )
    return duration

def sort_by_start_date(records: Sequence[CycleRecord], reverse: bool = False) -> List[CycleRecord]:
    """Sort records by start date without touching the input sequence."""
    keyed = [(get_start_date(record), record) for record in records]
    keyed.sort(key=lambda pair: pair[0], reverse=reverse)
    return [record for _, record in keyed]

def days_between(later: date, earlier: date) -> int:
    """Signed number of whole days from earlier to later."""
    return (later - earlier).days

def round_half_away_from_zero(value: float) -> int:
    """
    Round a fractional day count to whole days, halves rounding away from zero.

    Example:
        >>> round_half_away_from_zero(28.5)
        29
        >>> round_half_away_from_zero(-28.5)
        -29
        >>> round_half_away_from_zero(28.49)
        28
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))

def add_days(start: date, days: float) -> date:
    """Add a possibly fractional number of days, rounding halves away from zero."""
    return start + timedelta(days=round_half_away_from_zero(days))

def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()
