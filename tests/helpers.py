from datetime import date, timedelta

from labor_hours.models import TimeEntry

MONDAY = date(2024, 3, 4)


def day(offset: int) -> date:
    return MONDAY + timedelta(days=offset)


def make_entry(offset: int, hours: float = 8.0, worker: str = "w1", job: str | None = None) -> TimeEntry:
    worked_date = day(offset)
    return TimeEntry(
        id=f"{worker}-{worked_date.isoformat()}-{job or 'main'}",
        worker_id=worker,
        worked_date=worked_date,
        hours=hours,
        job_id=job,
    )
