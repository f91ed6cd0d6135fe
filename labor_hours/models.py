from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional


class EarningsCode(str, Enum):
    REGULAR = "REG"
    OVERTIME = "OT"
    DOUBLE_TIME = "DT"


class RoundingType(str, Enum):
    NEAREST = "nearest"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class OvertimeSettings:
    daily_ot_threshold: float = 8.0
    daily_dt_threshold: float = 12.0
    weekly_ot_threshold: float = 40.0
    weekly_dt_threshold: float = 60.0
    ot_multiplier: float = 1.5
    dt_multiplier: float = 2.0
    seventh_day_ot: bool = True
    seventh_day_dt: bool = True
    use_daily_ot: bool = False
    use_weekly_ot: bool = True
    rounding_interval: int = 15  # minutes, 0 disables rounding
    rounding_type: RoundingType = RoundingType.NEAREST


@dataclass
class TimeEntry:
    id: str
    worker_id: str
    worked_date: date
    hours: float
    job_id: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class CalculatedHours:
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    double_time_hours: float = 0.0
    total_hours: float = 0.0
    consecutive_day: int = 1
    is_seventh_day: bool = False

    @property
    def earnings_code(self) -> EarningsCode:
        """Most escalated category carrying hours."""

        if self.double_time_hours > 0:
            return EarningsCode.DOUBLE_TIME
        if self.overtime_hours > 0:
            return EarningsCode.OVERTIME
        return EarningsCode.REGULAR


@dataclass
class WeeklyCalculation:
    days: Dict[date, CalculatedHours] = field(default_factory=dict)
    weekly_regular: float = 0.0
    weekly_overtime: float = 0.0
    weekly_double_time: float = 0.0

    @property
    def weekly_total(self) -> float:
        return self.weekly_regular + self.weekly_overtime + self.weekly_double_time

    def add_day(self, worked_date: date, hours: CalculatedHours) -> None:
        self.days[worked_date] = hours
        self.weekly_regular += hours.regular_hours
        self.weekly_overtime += hours.overtime_hours
        self.weekly_double_time += hours.double_time_hours


@dataclass(frozen=True)
class RateSchedule:
    regular_rate: float
    overtime_rate: Optional[float] = None
    double_time_rate: Optional[float] = None


@dataclass
class JobAllocation:
    job_id: Optional[str]
    hours: float
    calculated: CalculatedHours
    estimated_pay: float = 0.0


@dataclass
class SubmissionResult:
    worker_id: str
    worked_date: date
    day: CalculatedHours
    allocations: List[JobAllocation] = field(default_factory=list)

    @property
    def total_pay(self) -> float:
        return sum(allocation.estimated_pay for allocation in self.allocations)
