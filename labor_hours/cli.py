from __future__ import annotations
import argparse
from dataclasses import replace
from datetime import date
from pathlib import Path

from .config import get_settings, load_overtime_settings
from .csv_io import export_allocations, import_time_entries
from .logging import configure_logging, get_logger
from .models import OvertimeSettings, RateSchedule
from .monitoring import configure_error_monitoring
from .overtime import week_bounds
from .pay import rates_from_settings
from .summary import forecast_week, summarize_week
from .time_tracking import calculate_week, split_week, submit_job_entries
from .validation import JobHours, JobSubmission, review_entry
from .views import format_allocations, format_forecast, format_hours, format_timesheet

logger = get_logger(__name__)


def parse_date(value: str) -> date:
    return date.fromisoformat(value)


def parse_job(value: str) -> JobHours:
    job_id, sep, hours = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected JOB=HOURS, got {value!r}")
    return JobHours(job_id=job_id, hours=float(hours))


def settings_from_args(args: argparse.Namespace) -> OvertimeSettings:
    if args.settings:
        return load_overtime_settings(Path(args.settings))
    return get_settings().overtime_settings()


def rates_from_args(args: argparse.Namespace, settings: OvertimeSettings) -> RateSchedule:
    if args.rate is None:
        rates = get_settings().default_rates()
    else:
        rates = rates_from_settings(args.rate, settings)
    if args.ot_rate is not None:
        rates = replace(rates, overtime_rate=args.ot_rate)
    if args.dt_rate is not None:
        rates = replace(rates, double_time_rate=args.dt_rate)
    return rates


def cmd_week(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    entries = import_time_entries(Path(args.entries))
    calculation = calculate_week(entries, args.worker, parse_date(args.anchor), settings)
    summary = summarize_week(calculation, rates_from_args(args, settings))
    start, end = week_bounds(parse_date(args.anchor))
    print(f"Worker {args.worker}, week {start.isoformat()} - {end.isoformat()}")
    print(format_timesheet(summary))


def cmd_allocate(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    entries = import_time_entries(Path(args.entries))
    submission = JobSubmission(
        worker_id=args.worker,
        worked_date=parse_date(args.date),
        entries=args.job,
        expected_total=args.expected_total,
    )
    result = submit_job_entries(entries, submission, settings, rates_from_args(args, settings))
    day = result.day
    print(
        f"Day {result.worked_date.isoformat()}: {format_hours(day.total_hours)} "
        f"(consecutive day {day.consecutive_day}{', seventh day' if day.is_seventh_day else ''})"
    )
    print(format_allocations(result.allocations))
    print(f"Estimated pay: {result.total_pay:.2f}")
    if args.output:
        output_path = Path(args.output)
        export_allocations(output_path, result.allocations)
        print(f"Allocations exported to {output_path}")


def cmd_forecast(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    entries = import_time_entries(Path(args.entries))
    week, _ = split_week(entries, args.worker, parse_date(args.anchor))
    forecast = forecast_week(
        sum(entry.hours for entry in week),
        settings,
        rates_from_args(args, settings),
        additional_hours=args.additional,
    )
    print(format_forecast(forecast))


def cmd_review(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    entries = import_time_entries(Path(args.entries))
    worked_date = parse_date(args.date)
    week, _ = split_week(entries, args.worker, worked_date)
    prior = sum(entry.hours for entry in week if entry.worked_date != worked_date)
    review = review_entry(args.hours, prior, has_breaks=args.breaks, weekly_threshold=settings.weekly_ot_threshold)
    for warning in review.warnings:
        print(f"[{warning.severity}] {warning.type}: {warning.message}")
    print("Entry is valid" if review.is_valid else "Entry needs correction")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--settings", help="JSON file with overtime settings")
    parser.add_argument("--rate", type=float, help="Regular hourly rate")
    parser.add_argument("--ot-rate", type=float, help="Overtime rate (default: rate x OT multiplier)")
    parser.add_argument("--dt-rate", type=float, help="Double-time rate (default: rate x DT multiplier)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Labor hours and overtime calculator")
    sub = parser.add_subparsers(dest="command", required=True)

    week = sub.add_parser("week", help="Categorize a worker's week")
    week.add_argument("entries", help="CSV file of time entries")
    week.add_argument("worker")
    week.add_argument("anchor", help="Any date in the week")
    add_common_arguments(week)
    week.set_defaults(func=cmd_week)

    allocate = sub.add_parser("allocate", help="Split a multi-job day across its jobs")
    allocate.add_argument("entries", help="CSV file of existing time entries")
    allocate.add_argument("worker")
    allocate.add_argument("date")
    allocate.add_argument("--job", action="append", type=parse_job, required=True, help="JOB=HOURS, repeatable")
    allocate.add_argument("--expected-total", type=float, help="Day total the job hours must add up to")
    allocate.add_argument("--output", help="Write allocations to this CSV file")
    add_common_arguments(allocate)
    allocate.set_defaults(func=cmd_allocate)

    forecast = sub.add_parser("forecast", help="Forecast weekly overtime")
    forecast.add_argument("entries", help="CSV file of time entries")
    forecast.add_argument("worker")
    forecast.add_argument("anchor", help="Any date in the week")
    forecast.add_argument("--additional", type=float, default=0.0, help="Hours about to be added")
    add_common_arguments(forecast)
    forecast.set_defaults(func=cmd_forecast)

    review = sub.add_parser("review", help="Check a day's hours before submitting")
    review.add_argument("entries", help="CSV file of time entries")
    review.add_argument("worker")
    review.add_argument("date")
    review.add_argument("hours", type=float)
    review.add_argument("--breaks", action="store_true", help="A break was recorded")
    add_common_arguments(review)
    review.set_defaults(func=cmd_review)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    app_settings = get_settings()
    configure_logging(app_settings.log_level)
    configure_error_monitoring(app_settings)
    logger.debug("command_started", command=args.command)
    args.func(args)


if __name__ == "__main__":
    main()
