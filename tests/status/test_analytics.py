from __future__ import annotations

from datetime import date

from src.workboard.workboard.status.analytics import bucket_by_status, daily_series, summarize_period
from src.workboard.workboard.submissions.model import AssignmentRef, WorkSubmission


def _sub(sid, work_date, status, hours=1.0) -> WorkSubmission:
    return WorkSubmission(id=sid, assignment_id=sid, staff_id=7, work_date=work_date, hours_worked=hours, status=status)


def test_bucket_by_status():
    subs = [
        _sub(1, "2024-01-10", "VERIFIED"),
        _sub(2, "2024-01-10", "SUBMITTED"),
        _sub(3, "2024-01-10", None),
        _sub(4, "2024-01-10", "REJECTED"),
        WorkSubmission(id=5, assignment=AssignmentRef(id=1, status="VERIFIED")),
    ]

    b = bucket_by_status(subs)

    assert [s.id for s in b.pending] == [2, 3]
    assert [s.id for s in b.approved] == [1, 5]
    assert [s.id for s in b.rejected] == [4]


def test_summarize_period():
    subs = [
        _sub(1, "2024-01-01", "VERIFIED", 3),
        _sub(2, "2024-01-02", "REJECTED", 2),
        _sub(3, "2024-01-03T22:00:00Z", "SUBMITTED", 1.5),
        _sub(4, "2023-12-31", "VERIFIED", 8),
    ]

    stats = summarize_period(subs, start=date(2024, 1, 1), end=date(2024, 1, 3))

    assert stats.total == 3
    assert stats.verified == 1
    assert stats.pending == 1
    assert stats.rejected == 1
    assert stats.total_hours == 6.5
    assert stats.verified_hours == 3
    assert stats.approval_rate == 33


def test_approval_rate_rounds_half_up():
    subs = [_sub(1, "2024-01-01", "VERIFIED"), _sub(2, "2024-01-01", "VERIFIED"), _sub(3, "2024-01-01", "REJECTED")]
    subs += [_sub(4, "2024-01-02", "VERIFIED"), _sub(5, "2024-01-02", "REJECTED"), _sub(6, "2024-01-02", "REJECTED")]
    subs += [_sub(7, "2024-01-03", "VERIFIED"), _sub(8, "2024-01-03", "REJECTED")]

    stats = summarize_period(subs, start=date(2024, 1, 1), end=date(2024, 1, 3))

    # 4 of 8
    assert stats.approval_rate == 50
    assert summarize_period([], start=date(2024, 1, 1), end=date(2024, 1, 3)).approval_rate == 0


def test_daily_series_has_one_point_per_day():
    subs = [
        _sub(1, "2024-01-02", "VERIFIED", 1.25),
        _sub(2, "2024-01-02", "SUBMITTED", 1.0),
    ]

    points = daily_series(subs, start=date(2024, 1, 1), end=date(2024, 1, 3))

    assert [p.date for p in points] == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]
    assert points[0].submissions == 0
    assert points[1].submissions == 2
    assert points[1].verified == 1
    assert points[1].pending == 1
    assert points[1].hours == 2.3
