"""Command-line interface for the court hearing scheduler."""

from __future__ import annotations

import argparse
from datetime import date

from court_scheduler.config import SchedulerConfig, load_config
from court_scheduler.domain.db import DEFAULT_DB_URL, get_session, init_database
from court_scheduler.engine.orchestrator import build_schedule, generate_and_store_slots
from court_scheduler.io.export_csv import export_hearings_csv, export_unscheduled_csv
from court_scheduler.io.import_csv import import_petitions_csv
from court_scheduler.validator import summarize_schedule


def _load_cfg(args: argparse.Namespace) -> SchedulerConfig:
    return load_config(args.config) if args.config else SchedulerConfig()


def _cmd_init_db(args: argparse.Namespace) -> None:
    """Initialize the database."""
    init_database(args.db)
    print(f"[OK] Database initialized: {args.db}")


def _cmd_generate_slots(args: argparse.Namespace) -> None:
    """Generate hearing slots for the configured judges."""
    session = get_session(args.db)
    
    try:
        cfg = _load_cfg(args)
        start = date.fromisoformat(args.start)
        slots = generate_and_store_slots(session, cfg, start, args.weeks)
        session.close()
        print(f"[OK] Generated {len(slots)} slots starting {start}")
        
    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Slot generation failed: {e}")
        raise


def _cmd_import_petitions(args: argparse.Namespace) -> None:
    """Import petitions CSV into database."""
    session = get_session(args.db)
    
    try:
        count = import_petitions_csv(session, args.csv)
        session.close()
        print(f"[OK] Imported {count} petitions")
        
    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Import failed: {e}")
        raise


def _cmd_schedule(args: argparse.Namespace) -> None:
    """Assign stored petitions to stored slots."""
    session = get_session(args.db)
    
    try:
        cfg = _load_cfg(args)
        result = build_schedule(session, cfg, persist=not args.dry_run)
        
        if args.out and not args.dry_run:
            export_hearings_csv(session, args.out)
        if args.unscheduled_out and not args.dry_run:
            export_unscheduled_csv(session, args.unscheduled_out)
        
        session.close()
        print(summarize_schedule(result))
        
    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Scheduling failed: {e}")
        raise


def _cmd_export(args: argparse.Namespace) -> None:
    """Export stored hearings and unscheduled petitions to CSV."""
    session = get_session(args.db)
    
    try:
        if args.hearings:
            count = export_hearings_csv(session, args.hearings)
            print(f"[OK] Exported {count} hearings to {args.hearings}")
        
        if args.unscheduled:
            count = export_unscheduled_csv(session, args.unscheduled)
            print(f"[OK] Exported {count} unscheduled petitions to {args.unscheduled}")
        
        session.close()
        
    except Exception as e:
        session.close()
        print(f"[ERROR] Export failed: {e}")
        raise


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="court-scheduler",
        description="Assign pending petitions to court hearing slots"
    )
    
    # Global options
    parser.add_argument("--db", default=DEFAULT_DB_URL, help=f"Database URL (default: {DEFAULT_DB_URL})")
    parser.add_argument("--config", help="Path to config YAML/JSON (default: built-in settings)")
    
    sub = parser.add_subparsers(dest="command", required=True)
    
    # init-db command
    init = sub.add_parser("init-db", help="Initialize database")
    init.set_defaults(func=_cmd_init_db)
    
    # generate-slots command
    gen = sub.add_parser("generate-slots", help="Generate hearing slots for the judge roster")
    gen.add_argument("--start", required=True, help="First day (YYYY-MM-DD)")
    gen.add_argument("--weeks", type=int, help="Number of weeks (default: from config)")
    gen.set_defaults(func=_cmd_generate_slots)
    
    # import-petitions command
    imp = sub.add_parser("import-petitions", help="Import petitions CSV into database")
    imp.add_argument("--csv", required=True, help="Path to petitions CSV")
    imp.set_defaults(func=_cmd_import_petitions)
    
    # schedule command
    sch = sub.add_parser("schedule", help="Assign petitions to slots")
    sch.add_argument("--out", help="Optional: export hearings to CSV")
    sch.add_argument("--unscheduled-out", help="Optional: export unscheduled petitions to CSV")
    sch.add_argument("--dry-run", action="store_true", help="Do not persist hearings")
    sch.set_defaults(func=_cmd_schedule)
    
    # export command
    exp = sub.add_parser("export", help="Export stored results to CSV")
    exp.add_argument("--hearings", help="Path to export hearings CSV")
    exp.add_argument("--unscheduled", help="Path to export unscheduled petitions CSV")
    exp.set_defaults(func=_cmd_export)
    
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
