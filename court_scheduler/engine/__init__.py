"""Scheduling engine: slot generation and petition assignment."""

from .base import BaseScheduler
from .greedy import GreedyScheduler, schedule_hearings
from .orchestrator import build_schedule, generate_and_store_slots
from .slots import generate_slots

__all__ = [
    "BaseScheduler",
    "GreedyScheduler",
    "schedule_hearings",
    "build_schedule",
    "generate_and_store_slots",
    "generate_slots",
]
