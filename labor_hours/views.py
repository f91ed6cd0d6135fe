from __future__ import annotations
import math
from typing import Iterable

from .models import JobAllocation
from .summary import OvertimeForecast, WeeklySummary


def format_hours(hours: float) -> str:
    whole = math.floor(hours)
    minutes = math.floor((hours - whole) * 60 + 0.5)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    if minutes == 0:
        return f"{whole}h"
    return f"{whole}h {minutes}m"


def format_timesheet(summary: WeeklySummary) -> str:
    rows = ["Timesheet", "Date        Regular  Overtime  Double   Total   Pay"]
    for day in summary.days:
        marker = "  *7th day" if day.is_seventh_day else ""
        rows.append(
            f"{day.worked_date.isoformat()}  {day.regular_hours:>7.2f}  {day.overtime_hours:>8.2f}  "
            f"{day.double_time_hours:>6.2f}  {day.total_hours:>6.2f}  {day.pay:>8.2f}{marker}"
        )
    rows.append(
        f"Week: {format_hours(summary.total_hours)} "
        f"(regular {summary.regular_hours:.2f}, overtime {summary.overtime_hours:.2f}, "
        f"double-time {summary.double_time_hours:.2f})"
    )
    rows.append(f"Estimated pay: {summary.total_pay:.2f}")
    return "\n".join(rows)


def format_allocations(allocations: Iterable[JobAllocation]) -> str:
    rows = ["Job           Hours  Regular  Overtime  Double   Code  Pay"]
    for allocation in allocations:
        hours = allocation.calculated
        rows.append(
            f"{allocation.job_id or '-':<12}  {allocation.hours:>5.2f}  {hours.regular_hours:>7.2f}  "
            f"{hours.overtime_hours:>8.2f}  {hours.double_time_hours:>6.2f}  {hours.earnings_code.value:<4}  "
            f"{allocation.estimated_pay:>8.2f}"
        )
    return "\n".join(rows)


def format_forecast(forecast: OvertimeForecast) -> str:
    return "\n".join(
        [
            f"Weekly hours: {forecast.weekly_hours:.2f} ({forecast.status})",
            f"Until overtime: {format_hours(forecast.hours_until_overtime)} ({forecast.percent_to_overtime:.0f}% of threshold)",
            f"Regular {forecast.regular_hours:.2f}, overtime {forecast.overtime_hours:.2f}, "
            f"double-time {forecast.double_time_hours:.2f}",
            f"Estimated pay: {forecast.estimated_pay:.2f}",
        ]
    )
