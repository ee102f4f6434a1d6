"""Priority scoring for petitions."""

from __future__ import annotations

from datetime import datetime

from court_scheduler.config import SchedulerConfig
from court_scheduler.domain.entities import Petition


def days_since_filing(petition: Petition, now: datetime) -> int:
    """Whole days elapsed since filing; zero for filing dates in the future."""
    # timedelta.days floors, matching floor((now - filed) / 1 day)
    return max(0, (now - petition.filing_date).days)


def priority_score(
    petition: Petition,
    now: datetime | None = None,
    cfg: SchedulerConfig | None = None,
) -> int:
    """
    Calculate the scheduling rank of a petition.
    
    Higher score = scheduled first.
    
    Args:
        petition: Petition to score
        now: Evaluation instant (default: current wall-clock time)
        cfg: SchedulerConfig with priority_scores and age bonus settings
    
    Returns:
        Base score for the priority level plus a capped age bonus
    """
    cfg = cfg or SchedulerConfig()
    now = now or datetime.now()
    
    base = cfg.priority_scores[petition.priority.value]
    age_bonus = min(days_since_filing(petition, now) * cfg.age_bonus_per_day, cfg.age_bonus_cap)
    return base + age_bonus
