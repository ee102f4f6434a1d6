"""Domain errors raised by the scheduling core."""

from __future__ import annotations


class SchedulingError(Exception):
    """Base class for all court scheduler errors."""


class MalformedSlotError(SchedulingError, ValueError):
    """A time slot whose start or end cannot be read as a time of day."""

    def __init__(self, value: str, slot_id: str | None = None):
        self.value = value
        self.slot_id = slot_id
        where = f" on slot {slot_id}" if slot_id else ""
        super().__init__(f"Invalid time of day {value!r}{where}")


class ConfigurationError(SchedulingError, ValueError):
    """Invalid scheduler configuration file."""
