"""Time-of-day parsing and calendar helpers."""

from __future__ import annotations

from datetime import date, datetime, time

import pandas as pd

from court_scheduler.errors import MalformedSlotError

WEEKEND_DAYS = ("Saturday", "Sunday")


def parse_time_string(value: str) -> time:
    """
    Parse a wall-clock string ("HH:MM" or "HH:MM:SS") into a time of day.
    
    Raises:
        MalformedSlotError: If the string is not a valid time of day
    """
    if not isinstance(value, str):
        raise MalformedSlotError(repr(value))
    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise MalformedSlotError(value)
    try:
        return time(*(int(p) for p in parts))
    except ValueError as e:
        raise MalformedSlotError(value) from e


def calculate_slot_minutes(start_time: str, end_time: str) -> int:
    """
    Duration between two same-day wall-clock times, in minutes.
    
    An end before the start gives a negative duration.
    """
    start = parse_time_string(start_time)
    end = parse_time_string(end_time)
    day = date(1970, 1, 1)
    delta = datetime.combine(day, end) - datetime.combine(day, start)
    return int(delta.total_seconds() // 60)


def is_weekend(day: date) -> bool:
    """True for Saturday and Sunday."""
    return pd.Timestamp(day).day_name() in WEEKEND_DAYS
