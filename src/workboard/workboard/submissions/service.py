from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import now_local, to_date
from ..common.validators import coerce_id, require_hours, require_non_empty, same_id
from ..core.enums import ProofType, Role, SubmissionStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..logging_config import get_logger
from ..status.filters import is_active_on
from ..status.resolver import resolve_effective_status, submission_date_key
from .repository import AssignmentRepository, SubmissionGateway, SubmissionRepository

logger = get_logger("submissions.service")

_REVIEWERS = {Role.MANAGER, Role.ADMIN}
_REVIEWABLE = {SubmissionStatus.SUBMITTED, SubmissionStatus.PENDING}


class SubmissionService:
    """Validates staff submissions and manager reviews before they reach the API."""

    def __init__(
        self,
        assignments: AssignmentRepository,
        submissions: SubmissionRepository,
        gateway: SubmissionGateway,
    ):
        self._assignments = assignments
        self._submissions = submissions
        self._gateway = gateway

    @staticmethod
    def _id(value: Any, kind: str) -> int:
        number = coerce_id(value)
        if number is None:
            raise ValidationError(f"Invalid {kind} id")
        return number

    @staticmethod
    def _proof(proof_type: str, proof_text: str, proof_url: str) -> dict[str, Any]:
        try:
            kind = ProofType((proof_type or "TEXT").strip().upper())
        except ValueError:
            raise ValidationError("Unsupported proof type")

        if kind == ProofType.TEXT:
            return {"workProofType": kind.value, "workProofText": require_non_empty(proof_text, "Proof text")}
        return {"workProofType": kind.value, "workProofUrl": require_non_empty(proof_url, "Proof file")}

    def submit_work(
        self,
        *,
        current_role: Role,
        staff_id: int,
        assignment_id: int,
        hours_worked: Any,
        work_date: Any = None,
        now: Optional[datetime] = None,
        proof_type: str = "TEXT",
        proof_text: str = "",
        proof_url: str = "",
        staff_comment: str = "",
    ) -> int:
        if current_role != Role.STAFF:
            raise AuthorizationError("Only staff can submit work")

        staff_id = self._id(staff_id, "staff")
        assignment_id = self._id(assignment_id, "assignment")

        assignment = self._assignments.get_by_id(assignment_id)
        if not assignment:
            raise NotFoundError("Assignment not found")
        if not same_id(assignment.staff_id, staff_id):
            raise AuthorizationError("This responsibility is not assigned to you")

        hours = require_hours(hours_worked)

        now = now or now_local()
        today = now.date()
        day = to_date(work_date) if work_date else today
        if day is None:
            raise ValidationError("Invalid work date")
        if day < today:
            raise ValidationError("This date is locked")
        if day > today:
            raise ValidationError("Cannot submit work for a future date")

        if not is_active_on(assignment, day):
            raise ValidationError("Responsibility is not active on this date")

        day_key = day.isoformat()
        same_day = [s for s in assignment.work_submissions if submission_date_key(s) == day_key]
        same_day += [
            s for s in self._submissions.list_for_staff(staff_id)
            if same_id(s.assignment_id, assignment.id) and submission_date_key(s) == day_key
        ]
        if any(resolve_effective_status(s) != SubmissionStatus.REJECTED for s in same_day):
            raise ValidationError("Work already submitted for this date")

        payload: dict[str, Any] = {
            "assignment": {"connect": {"id": assignment_id}},
            "staff": {"connect": {"id": staff_id}},
            "hoursWorked": hours,
            "workDate": day_key,
        }
        payload.update(self._proof(proof_type, proof_text, proof_url))
        comment = (staff_comment or "").strip()
        if comment:
            payload["staffComment"] = comment

        new_id = self._gateway.create_submission(payload)
        logger.info(
            "work submitted: submission=%s assignment=%s staff=%s date=%s resubmission=%s",
            new_id, assignment_id, staff_id, day_key, bool(same_day),
        )
        return new_id

    def _review(
        self,
        *,
        current_role: Role,
        reviewer_id: int,
        submission_id: int,
        status: SubmissionStatus,
        rejection_reason: Optional[str] = None,
    ) -> None:
        if current_role not in _REVIEWERS:
            raise AuthorizationError("Only managers can review submissions")

        submission_id = self._id(submission_id, "submission")
        reviewer_id = self._id(reviewer_id, "reviewer")

        submission = self._submissions.get_by_id(submission_id)
        if not submission:
            raise NotFoundError("Submission not found")
        # verified and rejected are final for their date
        if resolve_effective_status(submission) not in _REVIEWABLE:
            raise ValidationError("Submission has already been reviewed")

        ok = self._gateway.set_review(
            submission_id=submission_id,
            status=status,
            reviewer_id=reviewer_id,
            rejection_reason=rejection_reason,
        )
        if not ok:
            raise ValidationError("Failed to update submission")
        logger.info("submission %s marked %s by %s", submission_id, status.value, reviewer_id)

    def verify_submission(self, *, current_role: Role, reviewer_id: int, submission_id: int) -> None:
        self._review(
            current_role=current_role,
            reviewer_id=reviewer_id,
            submission_id=submission_id,
            status=SubmissionStatus.VERIFIED,
        )

    def reject_submission(
        self,
        *,
        current_role: Role,
        reviewer_id: int,
        submission_id: int,
        rejection_reason: str,
    ) -> None:
        if current_role not in _REVIEWERS:
            raise AuthorizationError("Only managers can review submissions")

        reason = require_non_empty(rejection_reason, "Rejection reason")
        self._review(
            current_role=current_role,
            reviewer_id=reviewer_id,
            submission_id=submission_id,
            status=SubmissionStatus.REJECTED,
            rejection_reason=reason,
        )
