"""Pytest configuration and shared fixtures."""

from datetime import date, datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from court_scheduler.domain.entities import Petition, TimeSlot
from court_scheduler.domain.models import Base

# Monday 1 September 2025, 08:00
NOW = datetime(2025, 9, 1, 8, 0)
MONDAY = date(2025, 9, 1)
SATURDAY = date(2025, 9, 6)
SUNDAY = date(2025, 9, 7)
NEXT_MONDAY = date(2025, 9, 8)


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def db_session():
    """Create in-memory database session for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_petition():
    """Factory for petitions with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "id": f"p{n}",
            "case_number": f"CV/2025/{n:04d}",
            "petitioner_name": "John Smith",
            "respondent_name": "City Council",
            "petition_type": "civil",
            "priority": "medium",
            "is_bailable": False,
            "filing_date": NOW,
            "estimated_duration": 60,
            "description": "Civil suit for property dispute",
        }
        fields.update(overrides)
        return Petition(**fields)

    return _make


@pytest.fixture
def make_slot():
    """Factory for time slots with sensible defaults."""
    counter = {"n": 0}

    def _make(slot_date=MONDAY, start="09:00", end="12:00", **overrides):
        counter["n"] += 1
        fields = {
            "id": f"s{counter['n']}",
            "date": slot_date,
            "start_time": start,
            "end_time": end,
            "judge_id": "judge-1",
            "judge_name": "Justice A.K. Sharma",
            "courtroom": "Court 1",
            "is_available": True,
        }
        fields.update(overrides)
        return TimeSlot(**fields)

    return _make
