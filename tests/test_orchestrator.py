"""Tests for the orchestrator - slot storage and full scheduling runs against the database."""

from datetime import timedelta

import pytest

from court_scheduler.config import SchedulerConfig
from court_scheduler.domain.repositories import HearingRepository, PetitionRepository, TimeSlotRepository
from court_scheduler.engine.orchestrator import build_schedule, generate_and_store_slots
from court_scheduler.services.timeplan import is_weekend

from conftest import MONDAY, NEXT_MONDAY, NOW

pytestmark = pytest.mark.integration


@pytest.fixture
def sample_config():
    """Single-judge configuration."""
    return SchedulerConfig(judges=[{"id": "judge-1", "name": "Justice A.K. Sharma"}])


@pytest.fixture
def sample_petitions(db_session, make_petition):
    """A small docket with one petition that fits no slot."""
    petitions = [
        make_petition(priority="urgent", petition_type="bail", is_bailable=True, estimated_duration=30),
        make_petition(priority="high", petition_type="writ", estimated_duration=75),
        make_petition(priority="medium", filing_date=NOW - timedelta(days=10)),
        make_petition(priority="low", estimated_duration=200),
    ]
    PetitionRepository.bulk_create(db_session, petitions)
    return petitions


def test_generate_and_store_slots(db_session, sample_config):
    slots = generate_and_store_slots(db_session, sample_config, MONDAY, 1)

    assert len(slots) == 48
    stored = TimeSlotRepository.get_all(db_session)
    assert len(stored) == 48
    assert {s.id for s in stored} == {s.id for s in slots}
    assert len(TimeSlotRepository.get_by_date(db_session, MONDAY)) == 8


def test_regenerating_slots_replaces_old_ones(db_session, sample_config, sample_petitions):
    generate_and_store_slots(db_session, sample_config, MONDAY, 1)
    build_schedule(db_session, sample_config, now=NOW)

    generate_and_store_slots(db_session, sample_config, NEXT_MONDAY, 1)

    stored = TimeSlotRepository.get_all(db_session)
    assert len(stored) == 48
    assert min(s.date for s in stored) == NEXT_MONDAY
    assert HearingRepository.get_all(db_session) == []


def test_build_schedule_persists_hearings(db_session, sample_config, sample_petitions):
    generate_and_store_slots(db_session, sample_config, MONDAY, 1)

    result = build_schedule(db_session, sample_config, now=NOW)

    assert len(result.scheduled) == 3
    assert [p.estimated_duration for p in result.unscheduled] == [200]

    stored = HearingRepository.get_all(db_session)
    assert {h.id for h in stored} == {h.id for h in result.scheduled}
    assert all(not is_weekend(h.scheduled_date) for h in stored if h.petition.is_bailable)

    unscheduled = PetitionRepository.get_unscheduled(db_session)
    assert [p.id for p in unscheduled] == [p.id for p in result.unscheduled]


def test_urgent_petition_gets_first_slot(db_session, sample_config, sample_petitions):
    generate_and_store_slots(db_session, sample_config, MONDAY, 1)

    result = build_schedule(db_session, sample_config, now=NOW)

    urgent = next(h for h in result.scheduled if h.petition.priority.value == "urgent")
    assert urgent.scheduled_date == MONDAY


def test_rerun_replaces_previous_hearings(db_session, sample_config, sample_petitions):
    generate_and_store_slots(db_session, sample_config, MONDAY, 1)

    build_schedule(db_session, sample_config, now=NOW)
    build_schedule(db_session, sample_config, now=NOW)

    assert len(HearingRepository.get_all(db_session)) == 3


def test_dry_run_does_not_persist(db_session, sample_config, sample_petitions):
    generate_and_store_slots(db_session, sample_config, MONDAY, 1)

    result = build_schedule(db_session, sample_config, now=NOW, persist=False)

    assert len(result.scheduled) == 3
    assert HearingRepository.get_all(db_session) == []


def test_build_schedule_without_slots(db_session, sample_config, sample_petitions, capsys):
    result = build_schedule(db_session, sample_config, now=NOW)

    assert result.scheduled == []
    assert len(result.unscheduled) == len(sample_petitions)
    assert "[WARN] No time slots stored" in capsys.readouterr().out
