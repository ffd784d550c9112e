from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.workboard.workboard.core.enums import SubmissionStatus
from src.workboard.workboard.status.resolver import (
    get_status_for_date,
    has_submission_for_date,
    resolve_effective_status,
    resolve_submission_for_date,
    submissions_for_date,
)
from src.workboard.workboard.submissions.model import Assignment, AssignmentRef, WorkSubmission


def _sub(sid, work_date=None, status=None, assignment_id=1, **kw) -> WorkSubmission:
    return WorkSubmission(id=sid, assignment_id=assignment_id, staff_id=7, work_date=work_date, status=status, **kw)


def test_no_submission_means_pending():
    a = Assignment(id=1, staff_id=7)
    assert get_status_for_date(a, date(2024, 1, 10)) == SubmissionStatus.PENDING
    assert resolve_submission_for_date(a, date(2024, 1, 10)) is None


def test_status_does_not_carry_forward_to_later_days():
    a = Assignment(
        id=1,
        staff_id=7,
        work_submissions=(
            _sub(1, "2024-01-10", "VERIFIED", hours_worked=3),
            _sub(2, "2024-01-11", "SUBMITTED", hours_worked=2),
        ),
    )

    assert get_status_for_date(a, "2024-01-10") == SubmissionStatus.VERIFIED
    assert get_status_for_date(a, "2024-01-11") == SubmissionStatus.SUBMITTED
    assert get_status_for_date(a, "2024-01-12") == SubmissionStatus.PENDING


def test_date_match_ignores_time_of_day_and_offset():
    a = Assignment(id=1, work_submissions=(_sub(1, "2024-03-01T23:59:00Z", "SUBMITTED"),))
    target = datetime(2024, 3, 1, 0, 5, tzinfo=timezone.utc)

    found = resolve_submission_for_date(a, target)

    assert found is not None
    assert found.id == 1


def test_falls_back_to_submitted_at_when_work_date_missing():
    sub = _sub(1, None, "VERIFIED", submitted_at="2024-01-10T17:42:10.000Z")
    a = Assignment(id=1, work_submissions=(sub,))

    assert get_status_for_date(a, date(2024, 1, 10)) == SubmissionStatus.VERIFIED
    assert get_status_for_date(a, date(2024, 1, 11)) == SubmissionStatus.PENDING


def test_empty_work_date_string_also_falls_back():
    sub = _sub(1, "", "VERIFIED", submitted_at="2024-01-10")
    a = Assignment(id=1, work_submissions=(sub,))

    assert has_submission_for_date(a, "2024-01-10")


def test_fallback_list_matches_ids_numerically():
    a = Assignment(id="5")
    others = [
        _sub(1, "2024-01-10", "REJECTED", assignment_id=6),
        _sub(2, "2024-01-10", "VERIFIED", assignment_id=5),
    ]

    found = resolve_submission_for_date(a, "2024-01-10", others)

    assert found is not None
    assert found.id == 2


def test_fallback_requires_matching_assignment():
    a = Assignment(id=5)
    others = [_sub(1, "2024-01-10", "VERIFIED", assignment_id=6)]

    assert resolve_submission_for_date(a, "2024-01-10", others) is None
    assert get_status_for_date(a, "2024-01-10", others) == SubmissionStatus.PENDING


def test_attached_submissions_are_searched_before_fallback():
    a = Assignment(id=5, work_submissions=(_sub(1, "2024-01-10", "REJECTED", assignment_id=5),))
    others = [_sub(2, "2024-01-10", "VERIFIED", assignment_id=5)]

    assert resolve_submission_for_date(a, "2024-01-10", others).id == 1


def test_duplicates_first_match_wins():
    a = Assignment(
        id=1,
        work_submissions=(
            _sub(1, "2024-01-10", "REJECTED"),
            _sub(2, "2024-01-10T08:00:00", "SUBMITTED"),
        ),
    )

    assert resolve_submission_for_date(a, "2024-01-10").id == 1


def test_unparseable_dates_never_match():
    a = Assignment(id=1, work_submissions=(_sub(1, "not a date", "VERIFIED"),))

    assert get_status_for_date(a, "2024-01-10") == SubmissionStatus.PENDING
    assert get_status_for_date(a, "garbage") == SubmissionStatus.PENDING


@pytest.mark.parametrize(
    "own, nested, expected",
    [
        ("VERIFIED", "REJECTED", SubmissionStatus.VERIFIED),
        (None, "REJECTED", SubmissionStatus.REJECTED),
        (None, None, SubmissionStatus.SUBMITTED),
        ("", "PENDING", SubmissionStatus.PENDING),
        ("IN_PROGRESS", "IN_PROGRESS", SubmissionStatus.SUBMITTED),
        ("verified", None, SubmissionStatus.VERIFIED),
    ],
)
def test_effective_status_precedence(own, nested, expected):
    ref = AssignmentRef(id=1, status=nested) if nested is not None else None
    sub = WorkSubmission(id=1, status=own, assignment=ref)

    assert resolve_effective_status(sub) == expected


def test_effective_status_is_always_a_member():
    for sub in (WorkSubmission(id=1), WorkSubmission(id=2, status="???"), WorkSubmission(id=3, assignment=AssignmentRef())):
        assert resolve_effective_status(sub) in set(SubmissionStatus)


def test_submissions_for_date_keeps_input_order():
    subs = [
        _sub(3, "2024-01-10T10:00:00+05:30"),
        _sub(1, "2024-01-11"),
        _sub(2, date(2024, 1, 10)),
    ]

    assert [s.id for s in submissions_for_date(subs, "2024-01-10")] == [3, 2]
    assert submissions_for_date(subs, None) == []
