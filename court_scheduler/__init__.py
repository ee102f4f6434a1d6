"""Court hearing scheduler: assigns pending petitions to hearing slots.

Modules:
- config: load and validate configuration (YAML or JSON)
- errors: domain exceptions
- domain: entities, SQLAlchemy models and repositories
- services: time parsing, eligibility, priority scoring, urgency triage
- engine: slot generation, greedy assignment, orchestration
- io: CSV import/export
- validator: post-run validation and summary
- cli: command-line interface entrypoints
"""

__all__ = [
    "config",
    "errors",
    "domain",
    "services",
    "engine",
    "io",
    "validator",
    "cli",
]
