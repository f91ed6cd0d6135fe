from __future__ import annotations
import csv
from datetime import date
from pathlib import Path
from typing import Iterable

from .models import JobAllocation, TimeEntry


CSV_HEADERS = [
    "id",
    "worker_id",
    "worked_date",
    "hours",
    "job_id",
    "notes",
]

ALLOCATION_HEADERS = [
    "job_id",
    "hours",
    "regular_hours",
    "overtime_hours",
    "double_time_hours",
    "earnings_code",
    "estimated_pay",
]


def export_time_entries(path: Path, entries: Iterable[TimeEntry]) -> None:
    with path.open("w", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_HEADERS)
        writer.writeheader()
        for entry in entries:
            writer.writerow(
                {
                    "id": entry.id,
                    "worker_id": entry.worker_id,
                    "worked_date": entry.worked_date.isoformat(),
                    "hours": entry.hours,
                    "job_id": entry.job_id or "",
                    "notes": entry.notes or "",
                }
            )


def import_time_entries(path: Path) -> list[TimeEntry]:
    if not path.exists():
        raise FileNotFoundError(f"Time entries not found at {path}")
    entries: list[TimeEntry] = []
    with path.open() as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            entries.append(
                TimeEntry(
                    id=row["id"],
                    worker_id=row["worker_id"],
                    worked_date=date.fromisoformat(row["worked_date"]),
                    hours=float(row["hours"]),
                    job_id=row.get("job_id") or None,
                    notes=row.get("notes") or None,
                )
            )
    return entries


def export_allocations(path: Path, allocations: Iterable[JobAllocation]) -> None:
    with path.open("w", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=ALLOCATION_HEADERS)
        writer.writeheader()
        for allocation in allocations:
            hours = allocation.calculated
            writer.writerow(
                {
                    "job_id": allocation.job_id or "",
                    "hours": allocation.hours,
                    "regular_hours": round(hours.regular_hours, 4),
                    "overtime_hours": round(hours.overtime_hours, 4),
                    "double_time_hours": round(hours.double_time_hours, 4),
                    "earnings_code": hours.earnings_code.value,
                    "estimated_pay": round(allocation.estimated_pay, 2),
                }
            )
