"""Checks applied to time submitted by workers before it reaches the engine.

``JobSubmission`` rejects input the engine must never see. ``review_entry``
only produces advisory warnings for the person entering the time.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

MAX_DAILY_HOURS = 24.0
LONG_DAY_HOURS = 12.0
EXCESSIVE_DAY_HOURS = 16.0
BREAK_REQUIRED_HOURS = 6.0
TOTAL_TOLERANCE = 1e-6


class JobHours(BaseModel):
    job_id: Annotated[str, Field(min_length=1)]
    hours: Annotated[float, Field(ge=0)]
    description: str | None = None


class JobSubmission(BaseModel):
    worker_id: Annotated[str, Field(min_length=1)]
    worked_date: date
    entries: Annotated[List[JobHours], Field(min_length=1)]
    expected_total: float | None = None

    @field_validator("entries")
    @classmethod
    def unique_jobs(cls, value: List[JobHours]) -> List[JobHours]:
        job_ids = [entry.job_id for entry in value]
        if len(job_ids) != len(set(job_ids)):
            raise ValueError("Cannot have duplicate jobs in the same submission")
        return value

    @model_validator(mode="after")
    def check_total(self) -> "JobSubmission":
        total = self.total_hours
        if total > MAX_DAILY_HOURS:
            raise ValueError(f"Total hours cannot exceed {MAX_DAILY_HOURS:g} hours per day")
        if self.expected_total is not None and abs(total - self.expected_total) > TOTAL_TOLERANCE:
            raise ValueError(f"Job hours sum to {total:g}, expected {self.expected_total:g}")
        return self

    @property
    def total_hours(self) -> float:
        return sum(entry.hours for entry in self.entries)

    def job_hours(self) -> List[Tuple[Optional[str], float]]:
        return [(entry.job_id, entry.hours) for entry in self.entries]


WarningType = Literal["OVERTIME", "LONG_DAY", "MISSING_BREAK", "EXCESSIVE_HOURS"]
Severity = Literal["info", "warning", "error"]


@dataclass
class EntryWarning:
    type: WarningType
    severity: Severity
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class EntryReview:
    is_valid: bool
    warnings: List[EntryWarning]
    weekly_hours: float
    overtime_hours: float


def review_entry(
    hours: float,
    prior_weekly_hours: float = 0.0,
    has_breaks: bool = False,
    weekly_threshold: float = 40.0,
) -> EntryReview:
    warnings: List[EntryWarning] = []
    weekly_hours = prior_weekly_hours + hours
    overtime_hours = max(0.0, weekly_hours - weekly_threshold)

    if hours > LONG_DAY_HOURS:
        warnings.append(
            EntryWarning(
                type="LONG_DAY",
                severity="warning",
                message=f"You're recording {hours:g} hours for this day. Please confirm this is correct.",
                details={"hours": hours},
            )
        )
    if hours > EXCESSIVE_DAY_HOURS:
        warnings.append(
            EntryWarning(
                type="EXCESSIVE_HOURS",
                severity="error",
                message=f"{hours:g} hours in a single day exceeds reasonable limits. Please verify your entry.",
                details={"hours": hours},
            )
        )
    if weekly_hours > weekly_threshold:
        warnings.append(
            EntryWarning(
                type="OVERTIME",
                severity="info",
                message=(
                    f"This entry brings your weekly total to {weekly_hours:.1f} hours "
                    f"({overtime_hours:.1f} hours overtime)."
                ),
                details={"weekly_hours": weekly_hours, "overtime_hours": overtime_hours},
            )
        )
    if hours > BREAK_REQUIRED_HOURS and not has_breaks:
        warnings.append(
            EntryWarning(
                type="MISSING_BREAK",
                severity="warning",
                message=f"You worked {hours:g} hours without recording a break. Did you take a lunch break?",
                details={"hours": hours},
            )
        )

    return EntryReview(
        is_valid=not any(w.severity == "error" for w in warnings),
        warnings=warnings,
        weekly_hours=weekly_hours,
        overtime_hours=overtime_hours,
    )
