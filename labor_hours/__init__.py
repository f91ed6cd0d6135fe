"""Labor hours categorization and overtime allocation."""

from .allocation import allocate_jobs
from .models import (
    CalculatedHours,
    EarningsCode,
    JobAllocation,
    OvertimeSettings,
    RateSchedule,
    RoundingType,
    SubmissionResult,
    TimeEntry,
    WeeklyCalculation,
)
from .overtime import allocate_week, apply_weekly_thresholds, categorize_day, consecutive_work_days, week_bounds
from .pay import calculate_pay, pay_for
from .rounding import round_hours

__all__ = [
    "CalculatedHours",
    "EarningsCode",
    "JobAllocation",
    "OvertimeSettings",
    "RateSchedule",
    "RoundingType",
    "SubmissionResult",
    "TimeEntry",
    "WeeklyCalculation",
    "allocate_jobs",
    "allocate_week",
    "apply_weekly_thresholds",
    "calculate_pay",
    "categorize_day",
    "consecutive_work_days",
    "pay_for",
    "round_hours",
    "week_bounds",
]
