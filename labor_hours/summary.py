from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import List, Literal

from .models import CalculatedHours, OvertimeSettings, RateSchedule, WeeklyCalculation
from .pay import pay_for

APPROACHING_RATIO = 0.9

ForecastStatus = Literal["safe", "approaching", "overtime", "excessive"]


@dataclass
class DaySummary:
    worked_date: date
    regular_hours: float
    overtime_hours: float
    double_time_hours: float
    total_hours: float
    pay: float
    is_seventh_day: bool = False


@dataclass
class WeeklySummary:
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    double_time_hours: float = 0.0
    total_hours: float = 0.0
    total_pay: float = 0.0
    days: List[DaySummary] = field(default_factory=list)


def summarize_week(calculation: WeeklyCalculation, rates: RateSchedule) -> WeeklySummary:
    """Presentation totals for a calculated week, rounded to hundredths."""

    summary = WeeklySummary()
    total_pay = 0.0
    for worked_date, hours in calculation.days.items():
        pay = pay_for(hours, rates)
        total_pay += pay
        summary.days.append(
            DaySummary(
                worked_date=worked_date,
                regular_hours=round(hours.regular_hours, 2),
                overtime_hours=round(hours.overtime_hours, 2),
                double_time_hours=round(hours.double_time_hours, 2),
                total_hours=round(hours.total_hours, 2),
                pay=round(pay, 2),
                is_seventh_day=hours.is_seventh_day,
            )
        )
    summary.regular_hours = round(calculation.weekly_regular, 2)
    summary.overtime_hours = round(calculation.weekly_overtime, 2)
    summary.double_time_hours = round(calculation.weekly_double_time, 2)
    summary.total_hours = round(calculation.weekly_total, 2)
    summary.total_pay = round(total_pay, 2)
    return summary


@dataclass
class OvertimeForecast:
    weekly_hours: float
    regular_hours: float
    overtime_hours: float
    double_time_hours: float
    percent_to_overtime: float
    hours_until_overtime: float
    estimated_pay: float
    status: ForecastStatus


def forecast_week(
    weekly_hours: float,
    settings: OvertimeSettings,
    rates: RateSchedule,
    additional_hours: float = 0.0,
) -> OvertimeForecast:
    """Project where a week lands against the weekly thresholds.

    Uses weekly thresholds only; it is an estimate shown while entering time,
    not a substitute for ``allocate_week``.
    """
    total = weekly_hours + additional_hours
    ot_threshold = settings.weekly_ot_threshold
    dt_threshold = settings.weekly_dt_threshold

    regular = min(total, ot_threshold)
    overtime = max(0.0, min(total - ot_threshold, dt_threshold - ot_threshold))
    double_time = max(0.0, total - max(dt_threshold, ot_threshold))

    if total >= dt_threshold:
        status: ForecastStatus = "excessive"
    elif total >= ot_threshold:
        status = "overtime"
    elif total >= ot_threshold * APPROACHING_RATIO:
        status = "approaching"
    else:
        status = "safe"

    percent = min(100.0, total / ot_threshold * 100) if ot_threshold > 0 else 100.0
    return OvertimeForecast(
        weekly_hours=total,
        regular_hours=regular,
        overtime_hours=overtime,
        double_time_hours=double_time,
        percent_to_overtime=percent,
        hours_until_overtime=max(0.0, ot_threshold - total),
        estimated_pay=pay_for(CalculatedHours(regular, overtime, double_time, total), rates),
        status=status,
    )
