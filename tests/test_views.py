from helpers import day
from labor_hours.models import CalculatedHours, JobAllocation
from labor_hours.summary import DaySummary, WeeklySummary
from labor_hours.views import format_allocations, format_hours, format_timesheet


def test_format_hours():
    assert format_hours(8.0) == "8h"
    assert format_hours(7.5) == "7h 30m"
    assert format_hours(7.999) == "8h"
    assert format_hours(0.25) == "0h 15m"


def test_timesheet_marks_seventh_day():
    summary = WeeklySummary(
        regular_hours=0.0,
        overtime_hours=6.0,
        total_hours=6.0,
        total_pay=180.0,
        days=[DaySummary(day(6), 0.0, 6.0, 0.0, 6.0, 180.0, is_seventh_day=True)],
    )

    output = format_timesheet(summary).splitlines()

    assert output[2].startswith("2024-03-10")
    assert output[2].endswith("*7th day")
    assert output[-2].startswith("Week: 6h")
    assert output[-1] == "Estimated pay: 180.00"


def test_allocations_show_earnings_code():
    allocations = [
        JobAllocation("A", 6.0, CalculatedHours(4.8, 1.2, 0.0, 6.0), 132.0),
        JobAllocation(None, 4.0, CalculatedHours(4.0, 0.0, 0.0, 4.0), 80.0),
    ]

    rows = format_allocations(allocations).splitlines()

    assert rows[1].startswith("A ")
    assert " OT " in rows[1]
    assert rows[2].startswith("- ")
    assert " REG " in rows[2]
