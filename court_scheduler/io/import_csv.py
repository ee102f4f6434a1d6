"""CSV import utilities to load petitions into the database."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List

import pandas as pd
from sqlalchemy.orm import Session

from court_scheduler.domain.entities import Petition
from court_scheduler.domain.repositories import PetitionRepository
from court_scheduler.services.triage import detect_urgency, generate_urgency_reason

REQUIRED_COLUMNS = ("case_number", "petition_type", "filing_date", "estimated_duration")
TRUE_VALUES = ("TRUE", "T", "1", "YES", "Y")


def _text(row: pd.Series, column: str) -> str:
    value = row.get(column)
    return str(value).strip() if pd.notna(value) else ""


def read_petitions_csv(csv_path: str | Path, now: datetime | None = None) -> List[Petition]:
    """
    Read petitions from a CSV file.
    
    Headers such as "Case Number" or "case_number" are both accepted. Rows
    without a priority are triaged with detect_urgency.
    
    Args:
        csv_path: Path to petitions CSV
        now: Evaluation instant for age-based triage (default: wall-clock now)
    
    Returns:
        Petitions in file order
    """
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, na_values=[""])
    
    # Normalize column names: "Case Number" -> "case_number"
    df.columns = df.columns.str.strip().str.lower().str.replace(r"\s+", "_", regex=True)
    
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Petitions CSV {csv_path} is missing columns: {missing}")
    
    # Offset-suffixed dates are converted to UTC and stored naive
    df["filing_date"] = pd.to_datetime(df["filing_date"], utc=True, format="mixed").dt.tz_convert(None)
    if df["filing_date"].isna().any():
        raise ValueError(f"Petitions CSV {csv_path} has rows without a filing date")

    petitions = []
    for index, row in df.iterrows():
        case_number = _text(row, "case_number")
        petition_type = _text(row, "petition_type").lower()
        is_bailable = _text(row, "is_bailable").upper() in TRUE_VALUES
        filing_date = row["filing_date"].to_pydatetime()
        priority = _text(row, "priority").lower()
        urgency_reason = _text(row, "urgency_reason")
        
        if not priority:
            priority = detect_urgency(
                petition_type,
                is_bailable,
                filing_date,
                description=_text(row, "description"),
                petitioner_name=_text(row, "petitioner_name"),
                respondent_name=_text(row, "respondent_name"),
                now=now,
            ).value
            if not urgency_reason:
                urgency_reason = generate_urgency_reason(petition_type, priority)
        
        try:
            petition = Petition(
                id=_text(row, "id") or case_number,
                case_number=case_number,
                petitioner_name=_text(row, "petitioner_name"),
                respondent_name=_text(row, "respondent_name"),
                petition_type=petition_type,
                priority=priority,
                is_bailable=is_bailable,
                filing_date=filing_date,
                estimated_duration=int(float(_text(row, "estimated_duration"))),
                description=_text(row, "description"),
                lawyer_name=_text(row, "lawyer_name"),
                urgency_reason=urgency_reason or None,
            )
        except ValueError as e:
            raise ValueError(f"Row {index + 2} of {csv_path}: {e}") from e
        petitions.append(petition)
    
    return petitions


def import_petitions_csv(session: Session, csv_path: str | Path, now: datetime | None = None) -> int:
    """
    Import petitions from CSV into database.
    
    Petitions whose id already exists are replaced.
    
    Returns:
        Number of petitions imported
    """
    petitions = read_petitions_csv(csv_path, now=now)
    PetitionRepository.bulk_create(session, petitions)
    
    print(f"[INFO] Imported {len(petitions)} petitions from {csv_path}")
    return len(petitions)
