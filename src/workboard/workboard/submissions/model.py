from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

Identifier = Union[int, str]
DateValue = Union[str, date, datetime]


@dataclass(frozen=True)
class Responsibility:
    """Recurring unit of work with an optional active window."""

    id: Identifier
    title: str = ""
    description: Optional[str] = None
    start_date: Optional[DateValue] = None
    end_date: Optional[DateValue] = None
    sub_department_id: Optional[Identifier] = None
    cycle: Optional[str] = None
    is_staff_created: bool = False


@dataclass(frozen=True)
class AssignmentRef:
    """Nested ``assignment`` object the API attaches to a submission.

    Only its status is read; it is the legacy place where review state used
    to live.
    """

    id: Optional[Identifier] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class WorkSubmission:
    """One staff member's work record for one assignment on one date."""

    id: Identifier
    assignment_id: Optional[Identifier] = None
    staff_id: Optional[Identifier] = None
    work_date: Optional[DateValue] = None
    submitted_at: Optional[DateValue] = None
    hours_worked: Optional[float] = None
    status: Optional[str] = None
    staff_comment: Optional[str] = None
    manager_comment: Optional[str] = None
    work_proof_type: Optional[str] = None
    work_proof_text: Optional[str] = None
    work_proof_url: Optional[str] = None
    rejection_reason: Optional[str] = None
    verified_at: Optional[DateValue] = None
    assignment: Optional[AssignmentRef] = None

    @property
    def effective_date_value(self) -> Optional[DateValue]:
        """``work_date``, falling back to ``submitted_at`` when absent."""
        if self.work_date is None or self.work_date == "":
            return self.submitted_at
        return self.work_date


@dataclass(frozen=True)
class Assignment:
    """Binds a responsibility to a staff member for every day it recurs."""

    id: Identifier
    staff_id: Optional[Identifier] = None
    responsibility_id: Optional[Identifier] = None
    responsibility: Optional[Responsibility] = None
    status: Optional[str] = None
    work_submissions: tuple[WorkSubmission, ...] = ()
