from __future__ import annotations
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, Optional, Set, Tuple

from .models import CalculatedHours, OvertimeSettings, TimeEntry, WeeklyCalculation
from .rounding import round_hours

SEVENTH_DAY = 7
SEVENTH_DAY_OT_HOURS = 8.0


def consecutive_work_days(entries: Iterable[TimeEntry], as_of: date, worker_id: Optional[str] = None) -> int:
    """Length of the unbroken run of worked dates ending at ``as_of``.

    The day itself always counts, so the result is at least 1. Only distinct
    dates matter: several job entries on one date are one worked day.
    """
    worked: Set[date] = {
        entry.worked_date
        for entry in entries
        if entry.worked_date <= as_of and (worker_id is None or entry.worker_id == worker_id)
    }
    count = 1
    cursor = as_of - timedelta(days=1)
    while cursor in worked:
        count += 1
        cursor -= timedelta(days=1)
    return count


def categorize_day(total_hours: float, settings: OvertimeSettings, is_seventh_day: bool = False) -> CalculatedHours:
    hours = round_hours(total_hours, settings.rounding_interval, settings.rounding_type)
    regular = overtime = double_time = 0.0

    if is_seventh_day and settings.seventh_day_ot:
        # Seventh day: first 8 hours overtime, remainder double-time only when enabled.
        overtime = min(hours, SEVENTH_DAY_OT_HOURS) if settings.seventh_day_dt else hours
        double_time = hours - overtime
    elif settings.use_daily_ot:
        regular = min(hours, settings.daily_ot_threshold)
        remaining = hours - regular
        if remaining > 0:
            overtime = min(remaining, max(settings.daily_dt_threshold - settings.daily_ot_threshold, 0))
            remaining -= overtime
        if remaining > 0:
            double_time = remaining
    else:
        # Weekly rules promote these later, if enabled.
        regular = hours

    return CalculatedHours(
        regular_hours=regular,
        overtime_hours=overtime,
        double_time_hours=double_time,
        total_hours=hours,
        is_seventh_day=is_seventh_day,
    )


def apply_weekly_thresholds(day: CalculatedHours, prior_weekly_hours: float, settings: OvertimeSettings) -> CalculatedHours:
    """Reclassify a day's hours against the hours already worked this week.

    Only categories move; ``total_hours`` is preserved.
    """
    regular = day.regular_hours
    overtime = day.overtime_hours
    double_time = day.double_time_hours
    ot_threshold = settings.weekly_ot_threshold
    dt_threshold = settings.weekly_dt_threshold
    new_total = prior_weekly_hours + day.total_hours

    if prior_weekly_hours < ot_threshold < new_total:
        kept = min(regular, max(0.0, ot_threshold - prior_weekly_hours))
        overtime += regular - kept
        regular = kept
    elif ot_threshold <= prior_weekly_hours < dt_threshold:
        if new_total > dt_threshold:
            ot_portion = min(regular, max(0.0, dt_threshold - prior_weekly_hours))
            overtime += ot_portion
            double_time += regular - ot_portion
        else:
            overtime += regular
        regular = 0.0
    elif prior_weekly_hours >= dt_threshold:
        # Daily double-time is already double-time; promote the rest.
        double_time += regular + overtime
        regular = overtime = 0.0

    return CalculatedHours(
        regular_hours=regular,
        overtime_hours=overtime,
        double_time_hours=double_time,
        total_hours=day.total_hours,
        consecutive_day=day.consecutive_day,
        is_seventh_day=day.is_seventh_day,
    )


def allocate_week(
    entries: Iterable[TimeEntry],
    settings: OvertimeSettings,
    history: Iterable[TimeEntry] = (),
) -> WeeklyCalculation:
    """Categorize one worker's week, one record per worked date.

    ``history`` holds earlier entries (for example the previous week) that are
    only consulted to detect seventh-day streaks crossing the week boundary.
    """
    entries = list(entries)
    workers = {entry.worker_id for entry in entries}
    streak_entries = entries + [entry for entry in history if entry.worker_id in workers]

    daily_hours: Dict[date, float] = defaultdict(float)
    for entry in entries:
        daily_hours[entry.worked_date] += entry.hours

    result = WeeklyCalculation()
    weekly_hours = 0.0
    for worked_date, hours in sorted(daily_hours.items()):
        consecutive = consecutive_work_days(streak_entries, worked_date)
        is_seventh_day = consecutive >= SEVENTH_DAY
        day = categorize_day(hours, settings, is_seventh_day)
        day.consecutive_day = consecutive
        if settings.use_weekly_ot and not is_seventh_day:
            day = apply_weekly_thresholds(day, weekly_hours, settings)
        weekly_hours += day.total_hours
        result.add_day(worked_date, day)
    return result


def week_bounds(anchor: date) -> Tuple[date, date]:
    start = anchor - timedelta(days=anchor.weekday())
    end = start + timedelta(days=6)
    return start, end
