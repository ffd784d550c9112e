"""API payload -> domain model conversion.

The backend sends camelCase JSON. Dates are kept exactly as delivered; the
status engine normalizes them when it compares.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from .model import Assignment, AssignmentRef, Responsibility, WorkSubmission


def _require_id(data: Mapping[str, Any], kind: str) -> Any:
    value = data.get("id")
    if value is None or value == "":
        raise ValidationError(f"{kind} payload has no id")
    return value


def _hours(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def responsibility_from_api(data: Mapping[str, Any]) -> Responsibility:
    return Responsibility(
        id=_require_id(data, "Responsibility"),
        title=data.get("title") or "",
        description=data.get("description"),
        start_date=data.get("startDate"),
        end_date=data.get("endDate"),
        sub_department_id=data.get("subDepartmentId"),
        cycle=data.get("cycle"),
        is_staff_created=bool(data.get("isStaffCreated", False)),
    )


def submission_from_api(data: Mapping[str, Any]) -> WorkSubmission:
    nested = data.get("assignment")
    ref = None
    if isinstance(nested, Mapping):
        ref = AssignmentRef(id=nested.get("id"), status=nested.get("status"))

    return WorkSubmission(
        id=_require_id(data, "WorkSubmission"),
        assignment_id=data.get("assignmentId"),
        staff_id=data.get("staffId"),
        work_date=data.get("workDate"),
        submitted_at=data.get("submittedAt"),
        hours_worked=_hours(data.get("hoursWorked")),
        status=data.get("status"),
        staff_comment=data.get("staffComment"),
        manager_comment=data.get("managerComment"),
        work_proof_type=data.get("workProofType"),
        work_proof_text=data.get("workProofText"),
        work_proof_url=data.get("workProofUrl"),
        rejection_reason=data.get("rejectionReason"),
        verified_at=data.get("verifiedAt"),
        assignment=ref,
    )


def assignment_from_api(data: Mapping[str, Any]) -> Assignment:
    resp = data.get("responsibility")
    subs = data.get("workSubmissions") or []
    return Assignment(
        id=_require_id(data, "Assignment"),
        staff_id=data.get("staffId"),
        responsibility_id=data.get("responsibilityId"),
        responsibility=responsibility_from_api(resp) if isinstance(resp, Mapping) else None,
        status=data.get("status"),
        work_submissions=tuple(submission_from_api(s) for s in subs if isinstance(s, Mapping)),
    )
