"""Orchestrator - loads stored data, runs the scheduler and persists the outcome."""

from __future__ import annotations

from datetime import date, datetime
from typing import List

from sqlalchemy.orm import Session

from court_scheduler.config import SchedulerConfig
from court_scheduler.domain.entities import ScheduleResult, TimeSlot
from court_scheduler.domain.repositories import HearingRepository, PetitionRepository, TimeSlotRepository
from court_scheduler.validator import validate_schedule

from .greedy import GreedyScheduler
from .slots import generate_slots


def generate_and_store_slots(
    session: Session,
    cfg: SchedulerConfig,
    start_date: date,
    week_count: int | None = None,
) -> List[TimeSlot]:
    """
    Generate slots for the configured judge roster and replace the stored ones.
    
    Existing hearings are dropped with the slots they were booked on.
    
    Returns:
        The generated slots
    """
    slots = generate_slots(cfg.judges, start_date, week_count, cfg)
    print(f"[INFO] Generated {len(slots)} slots for {len(cfg.judges)} judges from {start_date}")
    
    deleted = TimeSlotRepository.delete_all(session)
    if deleted > 0:
        print(f"[INFO] Deleted {deleted} existing slots")
    
    TimeSlotRepository.bulk_create(session, slots)
    print(f"[INFO] Persisted {len(slots)} slots to database")
    return slots


def build_schedule(
    session: Session,
    cfg: SchedulerConfig,
    now: datetime | None = None,
    persist: bool = True,
) -> ScheduleResult:
    """
    Schedule every stored petition into the stored slots.
    
    Args:
        session: Database session
        cfg: SchedulerConfig
        now: Evaluation instant for priority scoring (default: wall-clock now)
        persist: If True, replace stored hearings with the new ones
    
    Returns:
        ScheduleResult of the run
    """
    petitions = PetitionRepository.get_all(session)
    slots = TimeSlotRepository.get_all(session)
    print(f"[INFO] Scheduling {len(petitions)} petitions into {len(slots)} slots")
    
    if not petitions:
        print("[WARN] No petitions stored; nothing to schedule")
    if not slots:
        print("[WARN] No time slots stored; generate slots before scheduling")
    
    scheduler = GreedyScheduler(cfg)
    result = scheduler.make_schedule(petitions, slots, now=now)
    
    print("[INFO] Validating schedule...")
    validate_schedule(petitions, result)
    
    if persist:
        deleted = HearingRepository.delete_all(session)
        if deleted > 0:
            print(f"[INFO] Deleted {deleted} existing hearings")
        HearingRepository.bulk_create(session, result.scheduled)
        print(f"[INFO] Persisted {len(result.scheduled)} hearings to database")
    
    print(
        f"[OK] {len(result.scheduled)} hearings scheduled, "
        f"{len(result.unscheduled)} petitions require manual scheduling"
    )
    return result
