"""CSV export utilities for scheduling results."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from sqlalchemy.orm import Session

from court_scheduler.domain.entities import Priority
from court_scheduler.domain.repositories import HearingRepository, PetitionRepository

HEARING_COLUMNS = [
    "hearing_id", "date", "start_time", "end_time", "judge", "courtroom",
    "case_number", "petition_type", "priority", "is_bailable",
    "petitioner_name", "lawyer_name", "status",
]

UNSCHEDULED_COLUMNS = [
    "case_number", "petition_type", "priority", "is_bailable", "filing_date",
    "estimated_duration", "petitioner_name", "lawyer_name", "urgency_reason",
]

PRIORITY_RANK = {p.value: rank for rank, p in enumerate(Priority)}


def export_hearings_csv(session: Session, csv_path: str | Path) -> int:
    """
    Export stored hearings to CSV, ordered by date, start time and courtroom.
    
    Returns:
        Number of hearings exported
    """
    hearings = HearingRepository.get_all(session)
    df = pd.DataFrame(
        [
            {
                "hearing_id": h.id,
                "date": h.scheduled_date.isoformat(),
                "start_time": h.time_slot.start_time,
                "end_time": h.time_slot.end_time,
                "judge": h.time_slot.judge_name,
                "courtroom": h.time_slot.courtroom,
                "case_number": h.petition.case_number,
                "petition_type": h.petition.petition_type.value,
                "priority": h.petition.priority.value,
                "is_bailable": h.petition.is_bailable,
                "petitioner_name": h.petition.petitioner_name,
                "lawyer_name": h.petition.lawyer_name,
                "status": h.status.value,
            }
            for h in hearings
        ],
        columns=HEARING_COLUMNS,
    )
    if not df.empty:
        df = df.sort_values(["date", "start_time", "courtroom"], kind="stable")
    df.to_csv(csv_path, index=False)
    
    print(f"[INFO] Exported {len(df)} hearings to {csv_path}")
    return len(df)


def export_unscheduled_csv(session: Session, csv_path: str | Path) -> int:
    """
    Export petitions without a stored hearing, most urgent first.
    
    Returns:
        Number of petitions exported
    """
    petitions = PetitionRepository.get_unscheduled(session)
    df = pd.DataFrame(
        [
            {
                "case_number": p.case_number,
                "petition_type": p.petition_type.value,
                "priority": p.priority.value,
                "is_bailable": p.is_bailable,
                "filing_date": p.filing_date.date().isoformat(),
                "estimated_duration": p.estimated_duration,
                "petitioner_name": p.petitioner_name,
                "lawyer_name": p.lawyer_name,
                "urgency_reason": p.urgency_reason or "",
            }
            for p in petitions
        ],
        columns=UNSCHEDULED_COLUMNS,
    )
    if not df.empty:
        df = df.sort_values("priority", key=lambda s: s.map(PRIORITY_RANK), kind="stable")
    df.to_csv(csv_path, index=False)
    
    print(f"[INFO] Exported {len(df)} unscheduled petitions to {csv_path}")
    return len(df)
