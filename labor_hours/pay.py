from __future__ import annotations
from typing import Optional, Tuple

from .models import CalculatedHours, OvertimeSettings, RateSchedule

DEFAULT_OT_MULTIPLIER = 1.5
DEFAULT_DT_MULTIPLIER = 2.0


def effective_rates(rates: RateSchedule) -> Tuple[float, float, float]:
    """Regular, overtime and double-time rates with defaults filled in."""

    overtime_rate = rates.overtime_rate
    if overtime_rate is None:
        overtime_rate = rates.regular_rate * DEFAULT_OT_MULTIPLIER
    double_time_rate = rates.double_time_rate
    if double_time_rate is None:
        double_time_rate = rates.regular_rate * DEFAULT_DT_MULTIPLIER
    return rates.regular_rate, overtime_rate, double_time_rate


def calculate_pay(
    hours: CalculatedHours,
    regular_rate: float,
    overtime_rate: Optional[float] = None,
    double_time_rate: Optional[float] = None,
) -> float:
    """Estimated gross pay for categorized hours.

    Missing overtime and double-time rates default to 1.5x and 2x the regular
    rate. The result is not rounded to currency.
    """
    regular_rate, overtime_rate, double_time_rate = effective_rates(
        RateSchedule(regular_rate, overtime_rate, double_time_rate)
    )
    return (
        hours.regular_hours * regular_rate
        + hours.overtime_hours * overtime_rate
        + hours.double_time_hours * double_time_rate
    )


def pay_for(hours: CalculatedHours, rates: RateSchedule) -> float:
    return calculate_pay(hours, rates.regular_rate, rates.overtime_rate, rates.double_time_rate)


def rates_from_settings(regular_rate: float, settings: OvertimeSettings) -> RateSchedule:
    return RateSchedule(
        regular_rate=regular_rate,
        overtime_rate=regular_rate * settings.ot_multiplier,
        double_time_rate=regular_rate * settings.dt_multiplier,
    )
