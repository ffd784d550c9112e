from __future__ import annotations

from typing import Iterable

from ..core.enums import DayStatus, SubmissionStatus
from ..submissions.model import WorkSubmission
from .resolver import resolve_effective_status


def get_day_status(submissions: Iterable[WorkSubmission]) -> DayStatus:
    """Collapse one day's submissions into a single DayStatus.

    Rules are checked in order and the first match wins. VERIFIED and
    REJECTED require every submission to carry that status; a single PENDING
    item next to verified work puts the day in SUBMITTED.
    """
    seen = {resolve_effective_status(s) for s in submissions}
    if not seen:
        return DayStatus.NOT_SUBMITTED

    has_verified = SubmissionStatus.VERIFIED in seen
    has_submitted = SubmissionStatus.SUBMITTED in seen
    has_rejected = SubmissionStatus.REJECTED in seen
    has_pending = SubmissionStatus.PENDING in seen

    if has_verified and not (has_submitted or has_rejected or has_pending):
        return DayStatus.VERIFIED
    if has_rejected and not (has_verified or has_submitted or has_pending):
        return DayStatus.REJECTED
    if (has_verified or has_submitted) and has_rejected:
        return DayStatus.PARTIAL
    if has_submitted or has_verified or has_pending:
        return DayStatus.SUBMITTED
    return DayStatus.NOT_SUBMITTED
