from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import SubmissionStatus
from .model import Assignment, WorkSubmission


class AssignmentRepository(Protocol):
    def list_for_staff(self, staff_id: int) -> Sequence[Assignment]:
        raise NotImplementedError

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        raise NotImplementedError


class SubmissionRepository(Protocol):
    def list_for_staff(self, staff_id: int) -> Sequence[WorkSubmission]:
        raise NotImplementedError

    def list_all(self) -> Sequence[WorkSubmission]:
        raise NotImplementedError

    def get_by_id(self, submission_id: int) -> Optional[WorkSubmission]:
        raise NotImplementedError


class SubmissionGateway(Protocol):
    """Write side of the external work-submission API."""

    def create_submission(self, payload: dict[str, Any]) -> int:
        raise NotImplementedError

    def set_review(
        self,
        *,
        submission_id: int,
        status: SubmissionStatus,
        reviewer_id: int,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError
