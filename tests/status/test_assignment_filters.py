from __future__ import annotations

from datetime import date

import pytest

from src.workboard.workboard.status.filters import (
    active_unsubmitted_assignments,
    is_active_on,
    submitted_assignments_for_date,
)
from src.workboard.workboard.submissions.model import Assignment, Responsibility, WorkSubmission

TODAY = date(2024, 1, 12)


def _assignment(aid, start=None, end=None, subs=()) -> Assignment:
    resp = Responsibility(id=aid * 10, title=f"Task {aid}", start_date=start, end_date=end)
    return Assignment(id=aid, staff_id=7, responsibility_id=resp.id, responsibility=resp, work_submissions=tuple(subs))


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("2024-01-01", "2024-01-11", False),
        ("2024-01-01", "2024-01-12T00:00:00Z", True),
        ("2024-01-12", None, True),
        ("2024-01-13", None, False),
        (None, None, True),
        ("not-a-date", "2024-01-31", True),
        ("2024-01-01", "???", True),
    ],
)
def test_active_window_is_inclusive(start, end, expected):
    assert is_active_on(_assignment(1, start, end), TODAY) is expected


def test_missing_responsibility_is_always_active():
    assert is_active_on(Assignment(id=1), TODAY)


def test_unreadable_target_is_never_active():
    assert not is_active_on(_assignment(1), "nope")
    assert active_unsubmitted_assignments([_assignment(1)], "nope") == []


def test_unsubmitted_excludes_inactive_and_already_submitted():
    done = _assignment(1, subs=[WorkSubmission(id=1, assignment_id=1, work_date="2024-01-12", status="SUBMITTED")])
    expired = _assignment(2, "2024-01-01", "2024-01-11")
    open_ = _assignment(3, "2024-01-01", "2024-01-31")

    todo = active_unsubmitted_assignments([done, expired, open_], TODAY)

    assert [a.id for a in todo] == [3]


def test_rejected_work_still_counts_as_submitted_for_the_day():
    a = _assignment(1, subs=[WorkSubmission(id=1, assignment_id=1, work_date="2024-01-12", status="REJECTED")])

    assert active_unsubmitted_assignments([a], TODAY) == []


def test_fallback_list_is_used_for_both_filters():
    a = _assignment(4)
    others = [WorkSubmission(id=9, assignment_id="4", work_date="2024-01-12", status="VERIFIED")]

    assert active_unsubmitted_assignments([a], TODAY, others) == []

    [pair] = submitted_assignments_for_date([a], TODAY, others)
    assert pair.assignment is a
    assert pair.submission.id == 9


def test_submitted_for_date_keeps_assignment_order():
    a1 = _assignment(1, subs=[WorkSubmission(id=1, assignment_id=1, work_date="2024-01-12")])
    a2 = _assignment(2)
    a3 = _assignment(3, subs=[WorkSubmission(id=3, assignment_id=3, work_date="2024-01-12")])

    pairs = submitted_assignments_for_date([a3, a2, a1], TODAY)

    assert [p.assignment.id for p in pairs] == [3, 1]
