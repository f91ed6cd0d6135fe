from __future__ import annotations
from datetime import date
from typing import Iterable, List, Tuple

from .allocation import allocate_jobs
from .logging import get_logger
from .models import JobAllocation, OvertimeSettings, RateSchedule, SubmissionResult, TimeEntry, WeeklyCalculation
from .overtime import allocate_week, week_bounds
from .validation import JobSubmission

logger = get_logger(__name__)


def split_week(entries: Iterable[TimeEntry], worker_id: str, anchor: date) -> Tuple[List[TimeEntry], List[TimeEntry]]:
    """Return the worker's entries inside the week of ``anchor`` and those before it."""

    start, end = week_bounds(anchor)
    week: List[TimeEntry] = []
    history: List[TimeEntry] = []
    for entry in entries:
        if entry.worker_id != worker_id:
            continue
        if start <= entry.worked_date <= end:
            week.append(entry)
        elif entry.worked_date < start:
            history.append(entry)
    return week, history


def calculate_week(
    entries: Iterable[TimeEntry],
    worker_id: str,
    anchor: date,
    settings: OvertimeSettings,
) -> WeeklyCalculation:
    week, history = split_week(entries, worker_id, anchor)
    calculation = allocate_week(week, settings, history=history)
    logger.info(
        "week_calculated",
        worker_id=worker_id,
        week_start=week_bounds(anchor)[0].isoformat(),
        days=len(calculation.days),
        total_hours=calculation.weekly_total,
    )
    return calculation


def submit_daily_entry(
    existing: Iterable[TimeEntry],
    entry: TimeEntry,
    settings: OvertimeSettings,
    rates: RateSchedule,
) -> JobAllocation:
    """Categorize a single-job day against the rest of the worker's week.

    Entries already recorded for the same date are replaced by ``entry``.
    """
    others = [e for e in existing if e.worked_date != entry.worked_date and e.id != entry.id]
    week, history = split_week(others + [entry], entry.worker_id, entry.worked_date)
    calculation = allocate_week(week, settings, history=history)
    day = calculation.days[entry.worked_date]
    allocation = allocate_jobs(day, [(entry.job_id, entry.hours)], rates)[0]
    logger.info(
        "daily_entry_calculated",
        worker_id=entry.worker_id,
        worked_date=entry.worked_date.isoformat(),
        regular_hours=day.regular_hours,
        overtime_hours=day.overtime_hours,
        double_time_hours=day.double_time_hours,
    )
    return allocation


def submit_job_entries(
    existing: Iterable[TimeEntry],
    submission: JobSubmission,
    settings: OvertimeSettings,
    rates: RateSchedule,
) -> SubmissionResult:
    """Categorize a multi-job day and split the result across its jobs."""

    others = [e for e in existing if e.worked_date != submission.worked_date]
    submitted = [
        TimeEntry(
            id=f"{submission.worker_id}:{submission.worked_date.isoformat()}:{job.job_id}",
            worker_id=submission.worker_id,
            worked_date=submission.worked_date,
            hours=job.hours,
            job_id=job.job_id,
            notes=job.description,
        )
        for job in submission.entries
    ]
    week, history = split_week(others + submitted, submission.worker_id, submission.worked_date)
    calculation = allocate_week(week, settings, history=history)
    day = calculation.days[submission.worked_date]
    allocations = allocate_jobs(day, submission.job_hours(), rates)
    result = SubmissionResult(
        worker_id=submission.worker_id,
        worked_date=submission.worked_date,
        day=day,
        allocations=allocations,
    )
    logger.info(
        "job_entries_allocated",
        worker_id=submission.worker_id,
        worked_date=submission.worked_date.isoformat(),
        jobs=len(allocations),
        total_hours=day.total_hours,
        estimated_pay=round(result.total_pay, 2),
    )
    return result
