import pytest

from helpers import day
from labor_hours.models import CalculatedHours, EarningsCode, JobAllocation, SubmissionResult, WeeklyCalculation


def test_earnings_code_reports_most_escalated_category():
    assert CalculatedHours(regular_hours=8).earnings_code is EarningsCode.REGULAR
    assert CalculatedHours(regular_hours=8, overtime_hours=1).earnings_code is EarningsCode.OVERTIME
    assert CalculatedHours(overtime_hours=8, double_time_hours=0.5).earnings_code is EarningsCode.DOUBLE_TIME


def test_weekly_calculation_accumulates_days():
    week = WeeklyCalculation()
    week.add_day(day(0), CalculatedHours(regular_hours=8, total_hours=8))
    week.add_day(day(1), CalculatedHours(regular_hours=2, overtime_hours=4, double_time_hours=1, total_hours=7))

    assert (week.weekly_regular, week.weekly_overtime, week.weekly_double_time) == (10, 4, 1)
    assert week.weekly_total == 15


def test_submission_total_pay_sums_allocations():
    result = SubmissionResult(
        worker_id="w1",
        worked_date=day(4),
        day=CalculatedHours(regular_hours=10, total_hours=10),
        allocations=[
            JobAllocation("A", 6, CalculatedHours(regular_hours=6, total_hours=6), 120.555),
            JobAllocation("B", 4, CalculatedHours(regular_hours=4, total_hours=4), 80.0),
        ],
    )

    assert result.total_pay == pytest.approx(200.555)
