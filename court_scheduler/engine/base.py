"""Base scheduler interface that all hearing schedulers must implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

from court_scheduler.config import SchedulerConfig
from court_scheduler.domain.entities import Petition, ScheduleResult, TimeSlot


class BaseScheduler(ABC):
    """
    Abstract base class for hearing schedulers.
    
    A scheduler takes a snapshot of petitions and time slots and partitions
    the petitions into scheduled hearings and unscheduled leftovers. It owns
    no state between calls and never mutates its inputs.
    """
    
    name: str = "base"
    
    def __init__(self, cfg: SchedulerConfig | None = None):
        self.cfg = cfg or SchedulerConfig()
    
    @abstractmethod
    def make_schedule(
        self,
        petitions: Sequence[Petition] | None,
        slots: Sequence[TimeSlot] | None,
        now: datetime | None = None,
    ) -> ScheduleResult:
        """
        Assign petitions to slots.
        
        Args:
            petitions: Petitions awaiting a hearing, in caller order
            slots: Candidate time slots for this run
            now: Evaluation instant for priority scoring (default: wall-clock now)
        
        Returns:
            ScheduleResult with every petition in exactly one of its two lists
        """
        pass
