"""I/O utilities for CSV import/export."""

from .import_csv import import_petitions_csv, read_petitions_csv
from .export_csv import export_hearings_csv, export_unscheduled_csv

__all__ = [
    "import_petitions_csv",
    "read_petitions_csv",
    "export_hearings_csv",
    "export_unscheduled_csv",
]
