from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import to_date
from ..logging_config import get_logger
from ..submissions.model import Assignment, WorkSubmission
from .resolver import has_submission_for_date, resolve_submission_for_date

logger = get_logger("status.filters")


@dataclass(frozen=True)
class AssignmentForDate:
    assignment: Assignment
    submission: WorkSubmission


def is_active_on(assignment: Assignment, target_date: Any) -> bool:
    """Whether the assignment's responsibility recurs on ``target_date``.

    Both bounds are inclusive whole days. A missing or unreadable bound
    leaves that side open.
    """
    target = to_date(target_date)
    if target is None:
        return False

    resp = assignment.responsibility
    if resp is None:
        return True

    start = to_date(resp.start_date)
    if start is not None and target < start:
        return False
    end = to_date(resp.end_date)
    if end is not None and target > end:
        return False
    return True


def active_unsubmitted_assignments(
    assignments: Iterable[Assignment],
    target_date: Any,
    all_submissions: Optional[Sequence[WorkSubmission]] = None,
) -> list[Assignment]:
    """Assignments still waiting for work on ``target_date``."""
    if to_date(target_date) is None:
        logger.debug("unparseable target date %r, nothing is active", target_date)
        return []
    return [
        a for a in assignments
        if is_active_on(a, target_date) and not has_submission_for_date(a, target_date, all_submissions)
    ]


def submitted_assignments_for_date(
    assignments: Iterable[Assignment],
    target_date: Any,
    all_submissions: Optional[Sequence[WorkSubmission]] = None,
) -> list[AssignmentForDate]:
    out = []
    for a in assignments:
        submission = resolve_submission_for_date(a, target_date, all_submissions)
        if submission is not None:
            out.append(AssignmentForDate(assignment=a, submission=submission))
    return out
