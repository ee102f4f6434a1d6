"""Tests for service layer (timeplan, constraints, scoring, triage)."""

from datetime import date, datetime, timedelta

import pytest

from court_scheduler.config import SchedulerConfig
from court_scheduler.domain.entities import Petition, PetitionType, Priority
from court_scheduler.errors import MalformedSlotError
from court_scheduler.services.constraints import can_schedule_on_date, fits_duration
from court_scheduler.services.scoring import days_since_filing, priority_score
from court_scheduler.services.timeplan import calculate_slot_minutes, is_weekend, parse_time_string
from court_scheduler.services.triage import detect_urgency, generate_urgency_reason

from conftest import MONDAY, NOW, SATURDAY, SUNDAY


def test_parse_time_string():
    """Test time string parsing."""
    t = parse_time_string("09:30")
    assert t.hour == 9
    assert t.minute == 30
    assert parse_time_string("14:00:15").second == 15


@pytest.mark.parametrize("value", ["9am", "25:00", "12:60", "", "12", "ab:cd", None])
def test_parse_time_string_rejects_garbage(value):
    with pytest.raises(MalformedSlotError):
        parse_time_string(value)


def test_malformed_slot_error_is_a_value_error():
    with pytest.raises(ValueError):
        calculate_slot_minutes("noon", "17:00")


def test_calculate_slot_minutes():
    """Test slot duration calculation."""
    assert calculate_slot_minutes("09:00", "12:00") == 180
    assert calculate_slot_minutes("14:00", "17:00") == 180
    assert calculate_slot_minutes("09:15", "10:00") == 45
    assert calculate_slot_minutes("12:00", "09:00") == -180


def test_is_weekend():
    assert is_weekend(SATURDAY)
    assert is_weekend(SUNDAY)
    assert not is_weekend(MONDAY)
    assert not is_weekend(date(2025, 9, 5))  # Friday


def test_can_schedule_on_date(make_petition):
    bailable = make_petition(is_bailable=True)
    regular = make_petition(is_bailable=False)

    assert can_schedule_on_date(bailable, MONDAY)
    assert not can_schedule_on_date(bailable, SATURDAY)
    assert not can_schedule_on_date(bailable, SUNDAY)
    assert can_schedule_on_date(regular, SATURDAY)


def test_fits_duration(make_petition):
    petition = make_petition(estimated_duration=90)
    assert fits_duration(petition, 90)
    assert fits_duration(petition, 180)
    assert not fits_duration(petition, 89)


@pytest.mark.parametrize(
    "priority, expected",
    [("urgent", 100), ("high", 75), ("medium", 50), ("low", 25)],
)
def test_priority_score_base(make_petition, priority, expected):
    assert priority_score(make_petition(priority=priority, filing_date=NOW), NOW) == expected


def test_priority_score_age_bonus(make_petition):
    ten_days = make_petition(priority="low", filing_date=NOW - timedelta(days=10))
    assert priority_score(ten_days, NOW) == 25 + 20

    # partial days are floored
    almost_two = make_petition(priority="low", filing_date=NOW - timedelta(days=1, hours=23))
    assert priority_score(almost_two, NOW) == 25 + 2


def test_priority_score_age_bonus_is_capped(make_petition):
    old = make_petition(priority="high", filing_date=NOW - timedelta(days=100))
    assert priority_score(old, NOW) == 75 + 50


def test_priority_score_future_filing_gets_no_bonus(make_petition):
    future = make_petition(priority="medium", filing_date=NOW + timedelta(days=5))
    assert days_since_filing(future, NOW) == 0
    assert priority_score(future, NOW) == 50


def test_priority_score_defaults_to_wall_clock(make_petition):
    petition = make_petition(priority="medium", filing_date=datetime.now() - timedelta(days=3))
    assert priority_score(petition) == 56


def test_priority_score_uses_config(make_petition):
    cfg = SchedulerConfig(
        priority_scores={"urgent": 10, "high": 5, "medium": 3, "low": 1},
        age_bonus_per_day=1,
        age_bonus_cap=4,
    )
    petition = make_petition(priority="high", filing_date=NOW - timedelta(days=30))
    assert priority_score(petition, NOW, cfg) == 9


def test_priority_score_does_not_mutate(make_petition):
    petition = make_petition(filing_date=NOW - timedelta(days=3))
    before = Petition(**petition.__dict__)
    priority_score(petition, NOW)
    assert petition == before


def test_detect_urgency_keywords():
    assert detect_urgency("civil", False, NOW, description="Habeas Corpus petition", now=NOW) is Priority.URGENT
    assert detect_urgency("civil", False, NOW, respondent_name="Detention Centre", now=NOW) is Priority.URGENT
    assert detect_urgency("civil", False, NOW, description="seeking mandamus", now=NOW) is Priority.HIGH


def test_detect_urgency_by_type():
    assert detect_urgency("bail", False, NOW, now=NOW) is Priority.HIGH
    assert detect_urgency("criminal", True, NOW, now=NOW) is Priority.HIGH
    assert detect_urgency(PetitionType.WRIT, False, NOW, now=NOW) is Priority.HIGH
    assert detect_urgency("constitutional", False, NOW, now=NOW) is Priority.HIGH


def test_detect_urgency_by_age():
    assert detect_urgency("civil", False, NOW - timedelta(days=31), now=NOW) is Priority.HIGH
    assert detect_urgency("civil", False, NOW - timedelta(days=15), now=NOW) is Priority.MEDIUM
    assert detect_urgency("civil", False, NOW - timedelta(days=14), now=NOW) is Priority.LOW


def test_generate_urgency_reason():
    assert generate_urgency_reason("bail", "urgent").startswith("Accused in custody")
    assert generate_urgency_reason("writ", Priority.HIGH) == "Fundamental rights enforcement matter"
    assert generate_urgency_reason("civil", "medium") == ""
    assert generate_urgency_reason("criminal", "low") == ""
