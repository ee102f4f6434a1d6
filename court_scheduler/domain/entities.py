"""Immutable entities consumed and produced by the scheduling engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Iterator, List, Mapping, Optional


class PetitionType(str, Enum):
    BAIL = "bail"
    CIVIL = "civil"
    CRIMINAL = "criminal"
    CONSTITUTIONAL = "constitutional"
    WRIT = "writ"


class Priority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class HearingStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    POSTPONED = "postponed"
    CANCELLED = "cancelled"


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


@dataclass(frozen=True)
class Petition:
    """A case awaiting a hearing assignment."""

    id: str
    case_number: str
    petitioner_name: str
    respondent_name: str
    petition_type: PetitionType
    priority: Priority
    is_bailable: bool
    filing_date: datetime
    estimated_duration: int  # minutes
    description: str = ""
    lawyer_name: str = ""
    urgency_reason: Optional[str] = None

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "petition_type", PetitionType(self.petition_type))
        object.__setattr__(self, "priority", Priority(self.priority))
        object.__setattr__(self, "filing_date", _as_datetime(self.filing_date))
        if int(self.estimated_duration) <= 0:
            raise ValueError(
                f"Petition {self.id}: estimated_duration must be positive, got {self.estimated_duration}"
            )
        object.__setattr__(self, "estimated_duration", int(self.estimated_duration))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Petition":
        """Build a petition from a plain mapping (e.g. a CSV row or JSON record)."""
        return cls(
            id=str(data["id"]),
            case_number=str(data["case_number"]),
            petitioner_name=str(data.get("petitioner_name", "")),
            respondent_name=str(data.get("respondent_name", "")),
            petition_type=str(data["petition_type"]).lower(),
            priority=str(data["priority"]).lower(),
            is_bailable=bool(data.get("is_bailable", False)),
            filing_date=data["filing_date"],
            estimated_duration=int(data["estimated_duration"]),
            description=str(data.get("description", "") or ""),
            lawyer_name=str(data.get("lawyer_name", "") or ""),
            urgency_reason=data.get("urgency_reason") or None,
        )


@dataclass(frozen=True)
class Judge:
    """Roster projection of a judge: identity and display name."""

    id: str
    name: str


@dataclass(frozen=True)
class TimeSlot:
    """A judge-and-courtroom-bound calendar opening on a single day."""

    id: str
    date: date
    start_time: str
    end_time: str
    judge_id: str
    judge_name: str
    courtroom: str
    is_available: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", self.date.date())


@dataclass(frozen=True)
class ScheduledHearing:
    """One petition bound to one time slot."""

    id: str
    petition: Petition
    time_slot: TimeSlot
    scheduled_date: date
    status: HearingStatus = HearingStatus.SCHEDULED

    @classmethod
    def for_slot(cls, petition: Petition, slot: TimeSlot) -> "ScheduledHearing":
        return cls(
            id=f"hearing-{petition.id}-{slot.id}",
            petition=petition,
            time_slot=slot,
            scheduled_date=slot.date,
        )


@dataclass
class ScheduleResult:
    """Partition of a run's petitions into scheduled hearings and leftovers."""

    scheduled: List[ScheduledHearing] = field(default_factory=list)
    unscheduled: List[Petition] = field(default_factory=list)

    def __iter__(self) -> Iterator[list]:
        yield self.scheduled
        yield self.unscheduled
