"""Domain entities, persistence models and data access layer."""

from .entities import (
    HearingStatus,
    Judge,
    Petition,
    PetitionType,
    Priority,
    ScheduledHearing,
    ScheduleResult,
    TimeSlot,
)
from .models import Base, HearingRecord, PetitionRecord, TimeSlotRecord
from .repositories import HearingRepository, PetitionRepository, TimeSlotRepository

__all__ = [
    "HearingStatus",
    "Judge",
    "Petition",
    "PetitionType",
    "Priority",
    "ScheduledHearing",
    "ScheduleResult",
    "TimeSlot",
    "Base",
    "HearingRecord",
    "PetitionRecord",
    "TimeSlotRecord",
    "HearingRepository",
    "PetitionRepository",
    "TimeSlotRepository",
]
