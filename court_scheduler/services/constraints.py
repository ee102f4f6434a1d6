"""Eligibility predicates for placing a petition into a slot."""

from __future__ import annotations

from datetime import date

from court_scheduler.domain.entities import Petition

from .timeplan import is_weekend


def can_schedule_on_date(petition: Petition, slot_date: date) -> bool:
    """
    Check whether a petition may be heard on a given date.
    
    Bailable petitions cannot be heard on Saturday or Sunday; every other
    combination is allowed.
    """
    if petition.is_bailable and is_weekend(slot_date):
        return False
    return True


def fits_duration(petition: Petition, slot_minutes: int) -> bool:
    """True if a slot of `slot_minutes` can hold the petition's estimated hearing."""
    return slot_minutes >= petition.estimated_duration
