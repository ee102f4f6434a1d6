"""Slot generator - builds the calendar of candidate hearing slots for a judge roster."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Mapping

import pandas as pd

from court_scheduler.config import SchedulerConfig
from court_scheduler.domain.entities import Judge, TimeSlot
from court_scheduler.services.timeplan import is_weekend


def _as_judge(judge: Judge | Mapping[str, str]) -> Judge:
    if isinstance(judge, Judge):
        return judge
    return Judge(id=str(judge["id"]), name=str(judge["name"]))


def generate_slots(
    judges: Iterable[Judge | Mapping[str, str]],
    start_date: date,
    week_count: int | None = None,
    cfg: SchedulerConfig | None = None,
) -> List[TimeSlot]:
    """
    Generate morning and afternoon slots for every judge and courtroom.
    
    Weekdays use the whole courtroom pool; Saturday and Sunday only the first
    `cfg.weekend_courtroom_count` courtrooms.
    
    Args:
        judges: Roster of judges ({id, name} mappings or Judge objects)
        start_date: First calendar day to generate
        week_count: Number of weeks (default: cfg.default_weeks); <= 0 gives no slots
        cfg: SchedulerConfig with courtroom pool and session windows
    
    Returns:
        Slots ordered by day, judge, courtroom, session
    """
    cfg = cfg or SchedulerConfig()
    if week_count is None:
        week_count = cfg.default_weeks
    roster = [_as_judge(j) for j in judges]
    if week_count <= 0 or not roster:
        return []
    
    days = pd.date_range(pd.Timestamp(start_date), periods=week_count * 7, freq="D")
    slots: List[TimeSlot] = []
    
    for offset, day in enumerate(days):
        week, day_index = divmod(offset, 7)
        current = day.date()
        courtrooms = cfg.weekend_courtrooms if is_weekend(current) else cfg.courtrooms
        
        for judge_index, judge in enumerate(roster):
            for room_index, courtroom in enumerate(courtrooms):
                for session_name, window in cfg.sessions.items():
                    slots.append(
                        TimeSlot(
                            id=f"slot-{week}-{day_index}-{judge_index}-{room_index}-{session_name}",
                            date=current,
                            start_time=window.start,
                            end_time=window.end,
                            judge_id=judge.id,
                            judge_name=judge.name,
                            courtroom=courtroom,
                            is_available=True,
                        )
                    )
    
    return slots
