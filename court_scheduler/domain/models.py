"""SQLAlchemy models for the court scheduling system."""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, relationship

from .entities import HearingStatus, Petition, ScheduledHearing, TimeSlot


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class PetitionRecord(Base):
    """Stored petition awaiting (or holding) a hearing."""
    
    __tablename__ = "petitions"
    
    id = Column(String(64), primary_key=True)
    case_number = Column(String(50), nullable=False)
    petitioner_name = Column(String(200), nullable=False, default="")
    respondent_name = Column(String(200), nullable=False, default="")
    petition_type = Column(String(20), nullable=False)  # bail, civil, criminal, constitutional, writ
    priority = Column(String(10), nullable=False)  # urgent, high, medium, low
    is_bailable = Column(Boolean, nullable=False, default=False)
    filing_date = Column(DateTime, nullable=False)
    estimated_duration = Column(Integer, nullable=False)  # minutes
    lawyer_name = Column(String(200), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    urgency_reason = Column(Text, nullable=True)
    
    # Relationships
    hearings = relationship("HearingRecord", back_populates="petition")
    
    def to_entity(self) -> Petition:
        return Petition(
            id=self.id,
            case_number=self.case_number,
            petitioner_name=self.petitioner_name,
            respondent_name=self.respondent_name,
            petition_type=self.petition_type,
            priority=self.priority,
            is_bailable=bool(self.is_bailable),
            filing_date=self.filing_date,
            estimated_duration=self.estimated_duration,
            description=self.description or "",
            lawyer_name=self.lawyer_name or "",
            urgency_reason=self.urgency_reason,
        )
    
    @classmethod
    def from_entity(cls, petition: Petition) -> "PetitionRecord":
        return cls(
            id=petition.id,
            case_number=petition.case_number,
            petitioner_name=petition.petitioner_name,
            respondent_name=petition.respondent_name,
            petition_type=petition.petition_type.value,
            priority=petition.priority.value,
            is_bailable=petition.is_bailable,
            filing_date=petition.filing_date,
            estimated_duration=petition.estimated_duration,
            lawyer_name=petition.lawyer_name,
            description=petition.description,
            urgency_reason=petition.urgency_reason,
        )
    
    def __repr__(self) -> str:
        return f"<PetitionRecord(id={self.id}, case='{self.case_number}', priority='{self.priority}')>"


class TimeSlotRecord(Base):
    """Stored hearing slot for one judge in one courtroom."""
    
    __tablename__ = "time_slots"
    
    id = Column(String(100), primary_key=True)
    date = Column(Date, nullable=False)
    start_time = Column(String(8), nullable=False)  # HH:MM
    end_time = Column(String(8), nullable=False)  # HH:MM
    judge_id = Column(String(64), nullable=False)
    judge_name = Column(String(200), nullable=False)
    courtroom = Column(String(50), nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)
    
    # Relationships
    hearings = relationship("HearingRecord", back_populates="time_slot")
    
    def to_entity(self) -> TimeSlot:
        return TimeSlot(
            id=self.id,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            judge_id=self.judge_id,
            judge_name=self.judge_name,
            courtroom=self.courtroom,
            is_available=bool(self.is_available),
        )
    
    @classmethod
    def from_entity(cls, slot: TimeSlot) -> "TimeSlotRecord":
        return cls(
            id=slot.id,
            date=slot.date,
            start_time=slot.start_time,
            end_time=slot.end_time,
            judge_id=slot.judge_id,
            judge_name=slot.judge_name,
            courtroom=slot.courtroom,
            is_available=slot.is_available,
        )
    
    def __repr__(self) -> str:
        return f"<TimeSlotRecord(id={self.id}, date={self.date}, {self.start_time}-{self.end_time}, room='{self.courtroom}')>"


class HearingRecord(Base):
    """Hearing linking a petition to a time slot."""
    
    __tablename__ = "hearings"
    
    id = Column(String(200), primary_key=True)
    petition_id = Column(String(64), ForeignKey("petitions.id"), nullable=False)
    slot_id = Column(String(100), ForeignKey("time_slots.id"), nullable=False)
    scheduled_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default=HearingStatus.SCHEDULED.value)
    
    # Relationships
    petition = relationship("PetitionRecord", back_populates="hearings")
    time_slot = relationship("TimeSlotRecord", back_populates="hearings")
    
    def to_entity(self) -> ScheduledHearing:
        return ScheduledHearing(
            id=self.id,
            petition=self.petition.to_entity(),
            time_slot=self.time_slot.to_entity(),
            scheduled_date=self.scheduled_date,
            status=HearingStatus(self.status),
        )
    
    @classmethod
    def from_entity(cls, hearing: ScheduledHearing) -> "HearingRecord":
        return cls(
            id=hearing.id,
            petition_id=hearing.petition.id,
            slot_id=hearing.time_slot.id,
            scheduled_date=hearing.scheduled_date,
            status=hearing.status.value,
        )
    
    def __repr__(self) -> str:
        return f"<HearingRecord(id={self.id}, petition={self.petition_id}, slot={self.slot_id}, status={self.status})>"
