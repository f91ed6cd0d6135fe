from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .models import CalculatedHours, JobAllocation, RateSchedule
from .pay import pay_for

JobHours = Tuple[Optional[str], float]


def allocate_jobs(day: CalculatedHours, jobs: Sequence[JobHours], rates: RateSchedule) -> List[JobAllocation]:
    """Split one day's categorized hours across the jobs worked that day.

    Each job receives the share of every category equal to its share of the
    submitted raw hours, so per-category sums reproduce ``day``. A day with no
    hours gives every job zero in every category.
    """
    submitted = sum(hours for _, hours in jobs)
    allocations: List[JobAllocation] = []
    for job_id, hours in jobs:
        proportion = hours / submitted if submitted else 0.0
        regular = day.regular_hours * proportion
        overtime = day.overtime_hours * proportion
        double_time = day.double_time_hours * proportion
        calculated = CalculatedHours(
            regular_hours=regular,
            overtime_hours=overtime,
            double_time_hours=double_time,
            total_hours=regular + overtime + double_time,
            consecutive_day=day.consecutive_day,
            is_seventh_day=day.is_seventh_day,
        )
        allocations.append(
            JobAllocation(job_id=job_id, hours=hours, calculated=calculated, estimated_pay=pay_for(calculated, rates))
        )
    return allocations
