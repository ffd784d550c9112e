"""Date-scoped status resolution.

A submission's status describes its own work date only. An assignment that
was VERIFIED yesterday is PENDING today until something is submitted again.
Every view in the package derives per-day state through these functions.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import date_key
from ..common.validators import same_id
from ..core.enums import SubmissionStatus
from ..logging_config import get_logger
from ..submissions.model import Assignment, WorkSubmission

logger = get_logger("status.resolver")


def submission_date_key(submission: WorkSubmission) -> Optional[str]:
    """``YYYY-MM-DD`` of a submission's work date (or submitted_at)."""
    return date_key(submission.effective_date_value)


def _first_on(submissions: Iterable[WorkSubmission], target_key: str, assignment_id: Any = None) -> Optional[WorkSubmission]:
    for s in submissions:
        if submission_date_key(s) != target_key:
            continue
        if assignment_id is not None and not same_id(s.assignment_id, assignment_id):
            continue
        return s
    return None


def resolve_submission_for_date(
    assignment: Assignment,
    target_date: Any,
    all_submissions: Optional[Sequence[WorkSubmission]] = None,
) -> Optional[WorkSubmission]:
    """Find the submission that applies to ``assignment`` on ``target_date``.

    The assignment's own submissions are searched first. When none is on the
    target date and ``all_submissions`` is given, that list is searched for a
    submission on the same date whose assignment id matches numerically.
    Duplicates are not an error: the first match wins.
    """
    target_key = date_key(target_date)
    if target_key is None:
        logger.debug("unparseable target date %r, no submission resolved", target_date)
        return None

    found = _first_on(assignment.work_submissions or (), target_key)
    if found is None and all_submissions:
        found = _first_on(all_submissions, target_key, assignment_id=assignment.id)
    return found


def resolve_effective_status(submission: WorkSubmission) -> SubmissionStatus:
    """submission.status -> submission.assignment.status -> SUBMITTED."""
    status = SubmissionStatus.parse(submission.status)
    if status is None and submission.assignment is not None:
        status = SubmissionStatus.parse(submission.assignment.status)
    return status or SubmissionStatus.SUBMITTED


def get_status_for_date(
    assignment: Assignment,
    target_date: Any,
    all_submissions: Optional[Sequence[WorkSubmission]] = None,
) -> SubmissionStatus:
    submission = resolve_submission_for_date(assignment, target_date, all_submissions)
    if submission is None:
        return SubmissionStatus.PENDING
    return resolve_effective_status(submission)


def has_submission_for_date(
    assignment: Assignment,
    target_date: Any,
    all_submissions: Optional[Sequence[WorkSubmission]] = None,
) -> bool:
    return resolve_submission_for_date(assignment, target_date, all_submissions) is not None


def submissions_for_date(all_submissions: Iterable[WorkSubmission], target_date: Any) -> list[WorkSubmission]:
    target_key = date_key(target_date)
    if target_key is None:
        return []
    return [s for s in all_submissions if submission_date_key(s) == target_key]
