"""Repository classes for data access."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from .entities import Petition, ScheduledHearing, TimeSlot
from .models import HearingRecord, PetitionRecord, TimeSlotRecord


class PetitionRepository:
    """Repository for petition data access."""
    
    @staticmethod
    def get_all(session: Session) -> List[Petition]:
        """Get all petitions, oldest filing first."""
        records = session.query(PetitionRecord).order_by(PetitionRecord.filing_date, PetitionRecord.id).all()
        return [r.to_entity() for r in records]
    
    @staticmethod
    def get_by_id(session: Session, petition_id: str) -> Optional[Petition]:
        """Get petition by ID."""
        record = session.get(PetitionRecord, petition_id)
        return record.to_entity() if record else None
    
    @staticmethod
    def get_unscheduled(session: Session) -> List[Petition]:
        """Get petitions that have no stored hearing."""
        records = (
            session.query(PetitionRecord)
            .filter(~PetitionRecord.hearings.any())
            .order_by(PetitionRecord.filing_date, PetitionRecord.id)
            .all()
        )
        return [r.to_entity() for r in records]
    
    @staticmethod
    def bulk_create(session: Session, petitions: List[Petition]) -> None:
        """Create or replace multiple petitions."""
        for petition in petitions:
            session.merge(PetitionRecord.from_entity(petition))
        session.commit()


class TimeSlotRepository:
    """Repository for time slot data access."""
    
    @staticmethod
    def get_all(session: Session) -> List[TimeSlot]:
        """Get all slots ordered by date."""
        records = session.query(TimeSlotRecord).order_by(TimeSlotRecord.date, TimeSlotRecord.id).all()
        return [r.to_entity() for r in records]
    
    @staticmethod
    def get_by_date(session: Session, slot_date: date) -> List[TimeSlot]:
        """Get all slots on a specific date."""
        records = (
            session.query(TimeSlotRecord)
            .filter(TimeSlotRecord.date == slot_date)
            .order_by(TimeSlotRecord.id)
            .all()
        )
        return [r.to_entity() for r in records]
    
    @staticmethod
    def bulk_create(session: Session, slots: List[TimeSlot]) -> None:
        """Create multiple slots."""
        session.add_all([TimeSlotRecord.from_entity(s) for s in slots])
        session.commit()
    
    @staticmethod
    def delete_all(session: Session) -> int:
        """Delete every slot and the hearings booked on them. Returns number of deleted slots."""
        session.query(HearingRecord).delete()
        count = session.query(TimeSlotRecord).delete()
        session.commit()
        return count


class HearingRepository:
    """Repository for scheduled hearing data access."""
    
    @staticmethod
    def get_all(session: Session) -> List[ScheduledHearing]:
        """Get all hearings ordered by date."""
        records = (
            session.query(HearingRecord)
            .join(TimeSlotRecord)
            .order_by(HearingRecord.scheduled_date, TimeSlotRecord.start_time, TimeSlotRecord.courtroom)
            .all()
        )
        return [r.to_entity() for r in records]
    
    @staticmethod
    def bulk_create(session: Session, hearings: List[ScheduledHearing]) -> None:
        """Create multiple hearings."""
        session.add_all([HearingRecord.from_entity(h) for h in hearings])
        session.commit()
    
    @staticmethod
    def delete_all(session: Session) -> int:
        """Delete all hearings. Returns number of deleted rows."""
        count = session.query(HearingRecord).delete()
        session.commit()
        return count
