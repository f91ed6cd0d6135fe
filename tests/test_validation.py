from datetime import date

import pytest
from pydantic import ValidationError

from labor_hours.validation import JobHours, JobSubmission, review_entry


def build_submission(*jobs, expected_total=None) -> JobSubmission:
    return JobSubmission(
        worker_id="w1",
        worked_date=date(2024, 3, 8),
        entries=[{"job_id": job_id, "hours": hours} for job_id, hours in jobs],
        expected_total=expected_total,
    )


def test_valid_submission_exposes_job_hours():
    submission = build_submission(("A", 6.0), ("B", 4.0), expected_total=10.0)

    assert submission.total_hours == 10.0
    assert submission.job_hours() == [("A", 6.0), ("B", 4.0)]


def test_duplicate_jobs_rejected():
    with pytest.raises(ValidationError, match="duplicate jobs"):
        build_submission(("A", 4.0), ("A", 2.0))


def test_negative_hours_rejected():
    with pytest.raises(ValidationError):
        JobHours(job_id="A", hours=-1.0)


def test_day_over_24_hours_rejected():
    build_submission(("A", 20.0), ("B", 4.0))

    with pytest.raises(ValidationError, match="cannot exceed 24"):
        build_submission(("A", 20.0), ("B", 4.5))


def test_total_must_match_expected_day_total():
    build_submission(("A", 6.0), ("B", 4.0), expected_total=10.0000000001)

    with pytest.raises(ValidationError, match="expected 9"):
        build_submission(("A", 6.0), ("B", 4.0), expected_total=9.0)


def test_empty_submission_rejected():
    with pytest.raises(ValidationError):
        build_submission()


def test_review_flags_long_day_without_break():
    review = review_entry(13.0)

    assert review.is_valid
    assert [w.type for w in review.warnings] == ["LONG_DAY", "MISSING_BREAK"]


def test_review_rejects_excessive_hours():
    review = review_entry(17.0, has_breaks=True)

    assert not review.is_valid
    assert {w.type for w in review.warnings} == {"LONG_DAY", "EXCESSIVE_HOURS"}


def test_review_reports_weekly_overtime():
    review = review_entry(8.0, prior_weekly_hours=36.0, has_breaks=True)

    assert review.weekly_hours == 44.0
    assert review.overtime_hours == 4.0
    assert review.warnings[0].type == "OVERTIME"
    assert review.warnings[0].severity == "info"


def test_review_of_short_day_is_clean():
    review = review_entry(5.0)

    assert review.is_valid
    assert review.warnings == []
