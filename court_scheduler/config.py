"""Scheduler configuration: defaults plus YAML/JSON overlay."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

import yaml

from .errors import ConfigurationError, MalformedSlotError


PRIORITY_LEVELS = ("urgent", "high", "medium", "low")


@dataclass
class SessionWindow:
    start: str
    end: str


def _default_sessions() -> Dict[str, SessionWindow]:
    return {
        "morning": SessionWindow("09:00", "12:00"),
        "afternoon": SessionWindow("14:00", "17:00"),
    }


def _default_judges() -> List[Dict[str, str]]:
    return [
        {"id": "judge-1", "name": "Justice A.K. Sharma"},
        {"id": "judge-2", "name": "Justice M.R. Patel"},
        {"id": "judge-3", "name": "Justice S.L. Verma"},
        {"id": "judge-4", "name": "Justice R.K. Singh"},
    ]


@dataclass
class SchedulerConfig:
    courtrooms: List[str] = field(
        default_factory=lambda: ["Court 1", "Court 2", "Court 3", "Court 4"]
    )
    weekend_courtroom_count: int = 2
    sessions: Dict[str, SessionWindow] = field(default_factory=_default_sessions)
    default_weeks: int = 4
    priority_scores: Dict[str, int] = field(
        default_factory=lambda: {"urgent": 100, "high": 75, "medium": 50, "low": 25}
    )
    age_bonus_per_day: int = 2
    age_bonus_cap: int = 50
    judges: List[Dict[str, str]] = field(default_factory=_default_judges)

    @property
    def weekend_courtrooms(self) -> List[str]:
        return self.courtrooms[: self.weekend_courtroom_count]


def _read_raw(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    elif suffix == ".json":
        data = json.loads(text)
    else:
        raise ConfigurationError(f"Unsupported config file type: {path.suffix or path.name}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config root must be a mapping, got {type(data).__name__}")
    return data


def _parse_sessions(raw: dict) -> Dict[str, SessionWindow]:
    from .services.timeplan import parse_time_string

    sessions: Dict[str, SessionWindow] = {}
    for name, window in raw.items():
        if not isinstance(window, dict) or "start" not in window or "end" not in window:
            raise ConfigurationError(f"Session {name!r} needs 'start' and 'end'")
        start, end = str(window["start"]), str(window["end"])
        try:
            start_t, end_t = parse_time_string(start), parse_time_string(end)
        except MalformedSlotError as e:
            raise ConfigurationError(f"Session {name!r}: {e}") from e
        if start_t >= end_t:
            raise ConfigurationError(f"Session {name!r} ends before it starts: {start}-{end}")
        sessions[str(name)] = SessionWindow(start, end)
    if not sessions:
        raise ConfigurationError("At least one session window is required")
    return sessions


def validate_config(cfg: SchedulerConfig) -> None:
    """
    Check a configuration for internal consistency.

    Raises:
        ConfigurationError: If any value is out of range
    """
    if not cfg.courtrooms:
        raise ConfigurationError("Courtroom pool is empty")
    if not 0 <= cfg.weekend_courtroom_count <= len(cfg.courtrooms):
        raise ConfigurationError(
            f"weekend_courtroom_count must be between 0 and {len(cfg.courtrooms)}, "
            f"got {cfg.weekend_courtroom_count}"
        )
    unknown = set(cfg.priority_scores) - set(PRIORITY_LEVELS)
    missing = set(PRIORITY_LEVELS) - set(cfg.priority_scores)
    if unknown or missing:
        raise ConfigurationError(
            f"priority_scores must define exactly {list(PRIORITY_LEVELS)} "
            f"(unknown={sorted(unknown)}, missing={sorted(missing)})"
        )
    if cfg.age_bonus_per_day < 0 or cfg.age_bonus_cap < 0:
        raise ConfigurationError("Age bonus settings must not be negative")
    for judge in cfg.judges:
        if "id" not in judge or "name" not in judge:
            raise ConfigurationError(f"Judge entry needs 'id' and 'name': {judge}")


def load_config(path: str | Path) -> SchedulerConfig:
    """
    Load scheduler configuration from a YAML or JSON file.

    Keys missing from the file keep their defaults.

    Args:
        path: Path to a .yaml/.yml or .json file

    Returns:
        Validated SchedulerConfig
    """
    path = Path(path)
    raw = _read_raw(path)
    cfg = SchedulerConfig()

    known = {
        "courtrooms",
        "weekend_courtroom_count",
        "sessions",
        "default_weeks",
        "priority_scores",
        "age_bonus_per_day",
        "age_bonus_cap",
        "judges",
    }
    unknown = set(raw) - known
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")

    if "courtrooms" in raw:
        cfg.courtrooms = [str(c) for c in raw["courtrooms"]]
    if "weekend_courtroom_count" in raw:
        cfg.weekend_courtroom_count = int(raw["weekend_courtroom_count"])
    if "sessions" in raw:
        cfg.sessions = _parse_sessions(raw["sessions"] or {})
    if "default_weeks" in raw:
        cfg.default_weeks = int(raw["default_weeks"])
    if "priority_scores" in raw:
        cfg.priority_scores = {str(k).lower(): int(v) for k, v in raw["priority_scores"].items()}
    if "age_bonus_per_day" in raw:
        cfg.age_bonus_per_day = int(raw["age_bonus_per_day"])
    if "age_bonus_cap" in raw:
        cfg.age_bonus_cap = int(raw["age_bonus_cap"])
    if "judges" in raw:
        cfg.judges = [{str(k): str(v) for k, v in j.items()} for j in raw["judges"]]

    validate_config(cfg)
    print(f"[INFO] Loaded configuration from {path}")
    return cfg
