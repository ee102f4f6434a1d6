"""Greedy single-pass assignment of petitions to hearing slots."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Sequence, Set

from court_scheduler.config import SchedulerConfig
from court_scheduler.domain.entities import Petition, ScheduledHearing, ScheduleResult, TimeSlot
from court_scheduler.errors import MalformedSlotError
from court_scheduler.services.constraints import can_schedule_on_date, fits_duration
from court_scheduler.services.scoring import priority_score
from court_scheduler.services.timeplan import calculate_slot_minutes

from .base import BaseScheduler


class GreedyScheduler(BaseScheduler):
    """
    Highest-score-first, earliest-slot-first matcher.
    
    Petitions are taken in descending priority score (ties keep input order)
    and each one gets the earliest free, available, date-eligible slot long
    enough for its estimated duration. No backtracking: a petition that finds
    nothing is left unscheduled.
    """
    
    name = "greedy"
    
    def make_schedule(
        self,
        petitions: Sequence[Petition] | None,
        slots: Sequence[TimeSlot] | None,
        now: datetime | None = None,
    ) -> ScheduleResult:
        petitions = list(petitions or [])
        slots = list(slots or [])
        now = now or datetime.now()
        
        # sorted() is stable: equal scores keep input order
        scores = {id(p): priority_score(p, now, self.cfg) for p in petitions}
        ordered = sorted(petitions, key=lambda p: scores[id(p)], reverse=True)
        
        durations = self._slot_durations(slots)
        # Earliest date first; stable on input order within a date
        by_date = sorted(
            (s for s in slots if s.is_available and s.id in durations),
            key=lambda s: s.date,
        )
        
        result = ScheduleResult()
        used_slots: Set[str] = set()
        
        for petition in ordered:
            hearing = None
            for slot in by_date:
                if slot.id in used_slots:
                    continue
                if not can_schedule_on_date(petition, slot.date):
                    continue
                if fits_duration(petition, durations[slot.id]):
                    hearing = ScheduledHearing.for_slot(petition, slot)
                    break
            
            if hearing is None:
                result.unscheduled.append(petition)
            else:
                result.scheduled.append(hearing)
                used_slots.add(hearing.time_slot.id)
        
        return result
    
    @staticmethod
    def _slot_durations(slots: List[TimeSlot]) -> Dict[str, int]:
        """Duration in minutes per slot id; slots with unreadable times are left out."""
        durations: Dict[str, int] = {}
        for slot in slots:
            try:
                durations[slot.id] = calculate_slot_minutes(slot.start_time, slot.end_time)
            except MalformedSlotError as e:
                print(f"[WARN] Skipping slot {slot.id}: {e}")
        return durations


def schedule_hearings(
    petitions: Sequence[Petition] | None,
    slots: Sequence[TimeSlot] | None,
    now: datetime | None = None,
    cfg: SchedulerConfig | None = None,
) -> ScheduleResult:
    """
    Convenience function to run the greedy scheduler once.
    
    Args:
        petitions: Petitions awaiting a hearing
        slots: Candidate slots
        now: Evaluation instant for priority scoring (default: wall-clock now)
        cfg: Optional SchedulerConfig
    
    Returns:
        ScheduleResult (also unpackable as `scheduled, unscheduled`)
    """
    return GreedyScheduler(cfg).make_schedule(petitions, slots, now=now)
