"""Services for scheduling logic."""

from .constraints import can_schedule_on_date, fits_duration
from .scoring import days_since_filing, priority_score
from .timeplan import calculate_slot_minutes, is_weekend, parse_time_string
from .triage import detect_urgency, generate_urgency_reason

__all__ = [
    "can_schedule_on_date",
    "fits_duration",
    "days_since_filing",
    "priority_score",
    "calculate_slot_minutes",
    "is_weekend",
    "parse_time_string",
    "detect_urgency",
    "generate_urgency_reason",
]
