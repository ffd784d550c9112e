from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import coerce_id, same_id
from ..core.enums import SubmissionStatus
from ..logging_config import get_logger
from .mapper import assignment_from_api, submission_from_api
from .model import Assignment, WorkSubmission

logger = get_logger("submissions.json_repository")

ASSIGNMENTS_FILE = "assignments.json"
SUBMISSIONS_FILE = "work_submissions.json"


class JsonFileRepository:
    """Assignments and work submissions read from API JSON dumps.

    ``data_dir`` holds ``assignments.json`` and ``work_submissions.json``,
    each a JSON array in the shape the backend returns. Writes go back to
    ``work_submissions.json``.
    """

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)

    def _read(self, name: str) -> list[dict[str, Any]]:
        path = self._dir / name
        if not path.exists():
            logger.warning("data file %s not found, treating as empty", path)
            return []
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a JSON array")
        logger.debug("loaded %d records from %s", len(data), path)
        return data

    def _write(self, name: str, rows: list[dict[str, Any]]) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._dir / name
        with path.open("w", encoding="utf-8") as fh:
            json.dump(rows, fh, indent=2, ensure_ascii=False)

    # assignments

    def list_assignments_for_staff(self, staff_id: int) -> Sequence[Assignment]:
        return [
            assignment_from_api(row)
            for row in self._read(ASSIGNMENTS_FILE)
            if same_id(row.get("staffId"), staff_id)
        ]

    def get_assignment(self, assignment_id: int) -> Optional[Assignment]:
        for row in self._read(ASSIGNMENTS_FILE):
            if same_id(row.get("id"), assignment_id):
                return assignment_from_api(row)
        return None

    # submissions

    def list_submissions_for_staff(self, staff_id: int) -> Sequence[WorkSubmission]:
        return [
            submission_from_api(row)
            for row in self._read(SUBMISSIONS_FILE)
            if same_id(row.get("staffId"), staff_id)
        ]

    def list_all_submissions(self) -> Sequence[WorkSubmission]:
        return [submission_from_api(row) for row in self._read(SUBMISSIONS_FILE)]

    def get_submission(self, submission_id: int) -> Optional[WorkSubmission]:
        for row in self._read(SUBMISSIONS_FILE):
            if same_id(row.get("id"), submission_id):
                return submission_from_api(row)
        return None

    # gateway

    def create_submission(self, payload: dict[str, Any]) -> int:
        rows = self._read(SUBMISSIONS_FILE)
        next_id = max((coerce_id(r.get("id")) or 0 for r in rows), default=0) + 1

        row = {
            "id": next_id,
            "assignmentId": payload["assignment"]["connect"]["id"],
            "staffId": payload["staff"]["connect"]["id"],
            "hoursWorked": payload.get("hoursWorked"),
            "workDate": payload.get("workDate"),
            "workProofType": payload.get("workProofType"),
            "workProofText": payload.get("workProofText"),
            "workProofUrl": payload.get("workProofUrl"),
            "staffComment": payload.get("staffComment"),
            "status": SubmissionStatus.SUBMITTED.value,
            "submittedAt": now_local().isoformat(timespec="seconds"),
        }
        rows.append(row)
        self._write(SUBMISSIONS_FILE, rows)
        logger.info("stored submission %s in %s", next_id, self._dir)
        return next_id

    def set_review(
        self,
        *,
        submission_id: int,
        status: SubmissionStatus,
        reviewer_id: int,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        rows = self._read(SUBMISSIONS_FILE)
        for row in rows:
            if same_id(row.get("id"), submission_id):
                row["status"] = status.value
                row["verifiedById"] = reviewer_id
                row["verifiedAt"] = now_local().isoformat(timespec="seconds")
                row["rejectionReason"] = rejection_reason if status == SubmissionStatus.REJECTED else None
                self._write(SUBMISSIONS_FILE, rows)
                return True
        return False


class JsonAssignmentRepository:
    def __init__(self, store: JsonFileRepository):
        self._store = store

    def list_for_staff(self, staff_id: int) -> Sequence[Assignment]:
        return self._store.list_assignments_for_staff(staff_id)

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        return self._store.get_assignment(assignment_id)


class JsonSubmissionRepository:
    def __init__(self, store: JsonFileRepository):
        self._store = store

    def list_for_staff(self, staff_id: int) -> Sequence[WorkSubmission]:
        return self._store.list_submissions_for_staff(staff_id)

    def list_all(self) -> Sequence[WorkSubmission]:
        return self._store.list_all_submissions()

    def get_by_id(self, submission_id: int) -> Optional[WorkSubmission]:
        return self._store.get_submission(submission_id)
