"""Automatic urgency triage for petitions that arrive without a priority."""

from __future__ import annotations

from datetime import datetime
from typing import Dict

from court_scheduler.domain.entities import PetitionType, Priority

URGENT_KEYWORDS = (
    "habeas corpus", "detention", "custody", "arrest", "bail",
    "emergency", "urgent", "immediate", "injunction", "restraining",
)

HIGH_PRIORITY_KEYWORDS = (
    "constitutional", "fundamental rights", "writ", "mandamus",
    "certiorari", "prohibition", "quo warranto",
)

URGENCY_REASONS: Dict[PetitionType, str] = {
    PetitionType.BAIL: "Accused in custody, fundamental right to liberty at stake",
    PetitionType.CONSTITUTIONAL: "Constitutional rights violation requiring immediate judicial intervention",
    PetitionType.WRIT: "Fundamental rights enforcement matter",
    PetitionType.CRIMINAL: "Time-sensitive criminal proceedings affecting personal liberty",
    PetitionType.CIVIL: "Matter involves irreparable harm or significant financial implications",
}


def detect_urgency(
    petition_type: PetitionType | str,
    is_bailable: bool,
    filing_date: datetime,
    description: str = "",
    petitioner_name: str = "",
    respondent_name: str = "",
    now: datetime | None = None,
) -> Priority:
    """
    Infer a priority level from a petition's text, type and age.
    
    Rules are applied in order; the first match wins:
    urgent keywords, bail/bailable, constitutional/writ type,
    high-priority keywords, then age (>30 days high, >14 days medium).
    """
    petition_type = PetitionType(petition_type)
    now = now or datetime.now()
    full_text = f"{description} {petitioner_name} {respondent_name}".lower()
    
    if any(keyword in full_text for keyword in URGENT_KEYWORDS):
        return Priority.URGENT
    
    if petition_type == PetitionType.BAIL or is_bailable:
        return Priority.HIGH
    
    if petition_type in (PetitionType.CONSTITUTIONAL, PetitionType.WRIT):
        return Priority.HIGH
    
    if any(keyword in full_text for keyword in HIGH_PRIORITY_KEYWORDS):
        return Priority.HIGH
    
    age_days = (now - filing_date).days
    if age_days > 30:
        return Priority.HIGH
    if age_days > 14:
        return Priority.MEDIUM
    return Priority.LOW


def generate_urgency_reason(petition_type: PetitionType | str, priority: Priority | str) -> str:
    """Standard urgency reason for urgent/high petitions; empty otherwise."""
    if Priority(priority) not in (Priority.URGENT, Priority.HIGH):
        return ""
    return URGENCY_REASONS[PetitionType(petition_type)]
