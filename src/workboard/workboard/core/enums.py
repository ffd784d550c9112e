from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Role(str, Enum):
    """User role used for permission checks."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"


class SubmissionStatus(str, Enum):
    """Status of one work submission, valid only for its own work date."""

    PENDING = "PENDING"
    SUBMITTED = "SUBMITTED"
    VERIFIED = "VERIFIED"
    REJECTED = "REJECTED"

    @classmethod
    def parse(cls, value: Any) -> Optional["SubmissionStatus"]:
        """Return the matching member, or None for missing/unknown values.

        Assignment-level values such as ``IN_PROGRESS`` are not submission
        statuses and map to None.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class DayStatus(str, Enum):
    """Aggregate status of all submissions on one calendar day."""

    NOT_SUBMITTED = "NOT_SUBMITTED"
    SUBMITTED = "SUBMITTED"
    VERIFIED = "VERIFIED"
    REJECTED = "REJECTED"
    PARTIAL = "PARTIAL"


class ProofType(str, Enum):
    TEXT = "TEXT"
    PDF = "PDF"
    IMAGE = "IMAGE"
