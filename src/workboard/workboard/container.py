from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_ANALYTICS_DAYS, DEFAULT_HISTORY_PAGE_SIZE
from .status.service import WorkStatusService
from .submissions.json_repository import JsonAssignmentRepository, JsonFileRepository, JsonSubmissionRepository
from .submissions.service import SubmissionService


@dataclass(frozen=True)
class Container:
    store: JsonFileRepository

    assignments_repo: JsonAssignmentRepository
    submissions_repo: JsonSubmissionRepository

    status_service: WorkStatusService
    submission_service: SubmissionService


def build_container(*, settings: dict) -> Container:
    store = JsonFileRepository(str(settings["DATA_DIR"]))
    assignments_repo = JsonAssignmentRepository(store)
    submissions_repo = JsonSubmissionRepository(store)

    status_service = WorkStatusService(
        assignments_repo,
        submissions_repo,
        page_size=int(settings.get("HISTORY_PAGE_SIZE", DEFAULT_HISTORY_PAGE_SIZE)),
        analytics_days=int(settings.get("ANALYTICS_DAYS", DEFAULT_ANALYTICS_DAYS)),
    )
    submission_service = SubmissionService(assignments_repo, submissions_repo, store)

    return Container(
        store=store,
        assignments_repo=assignments_repo,
        submissions_repo=submissions_repo,
        status_service=status_service,
        submission_service=submission_service,
    )
