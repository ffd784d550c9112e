from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Optional, Union

from ..common.datetime_utils import format_long_date, to_date
from ..core.constants import DEFAULT_ANALYTICS_DAYS, DEFAULT_HISTORY_PAGE_SIZE
from ..core.enums import DayStatus, Role, SubmissionStatus
from ..core.exceptions import AuthorizationError, ValidationError
from ..logging_config import get_logger
from ..submissions.model import Assignment
from ..submissions.repository import AssignmentRepository, SubmissionRepository
from .aggregator import get_day_status
from .analytics import DailyPoint, StatusBuckets, SubmissionStats, bucket_by_status, daily_series, summarize_period
from .calendar_view import CalendarDay, DailyMetrics, build_calendar_month, compute_daily_metrics, is_locked
from .filters import AssignmentForDate, active_unsubmitted_assignments, submitted_assignments_for_date
from .history import HistoryPage, HistoryQuery, group_history, paginate
from .resolver import submissions_for_date

logger = get_logger("status.service")

_STATUS_LABELS = {
    "PENDING": "Pending",
    "SUBMITTED": "Submitted",
    "VERIFIED": "Verified",
    "REJECTED": "Rejected",
    "NOT_SUBMITTED": "Not Submitted",
    "PARTIAL": "Partial",
}

_STATUS_CSS = {
    "PENDING": "bg-warning text-dark",
    "SUBMITTED": "bg-primary",
    "VERIFIED": "bg-success",
    "REJECTED": "bg-danger",
    "PARTIAL": "bg-orange",
    "NOT_SUBMITTED": "bg-secondary",
}


@dataclass(frozen=True)
class StaffDayView:
    date: date
    display_date: str
    day_status: DayStatus
    is_locked: bool
    to_submit: list[Assignment]
    submitted: list[AssignmentForDate]


@dataclass(frozen=True)
class StaffAnalytics:
    stats: SubmissionStats
    daily: list[DailyPoint]


class WorkStatusService:
    def __init__(
        self,
        assignments: AssignmentRepository,
        submissions: SubmissionRepository,
        *,
        page_size: int = DEFAULT_HISTORY_PAGE_SIZE,
        analytics_days: int = DEFAULT_ANALYTICS_DAYS,
    ):
        if int(page_size) < 1:
            raise ValidationError("Page size must be at least 1")
        self._assignments = assignments
        self._submissions = submissions
        self._page_size = int(page_size)
        self._analytics_days = int(analytics_days)

    @staticmethod
    def _require_reviewer(current_role: Role) -> None:
        if current_role not in {Role.MANAGER, Role.ADMIN}:
            raise AuthorizationError("You do not have permission")

    def day_view(self, staff_id: int, *, target_date: Any, today: date) -> StaffDayView:
        day = to_date(target_date)
        if day is None:
            raise ValidationError("Invalid date")

        assignments = list(self._assignments.list_for_staff(int(staff_id)))
        submissions = list(self._submissions.list_for_staff(int(staff_id)))

        return StaffDayView(
            date=day,
            display_date=format_long_date(day),
            day_status=get_day_status(submissions_for_date(submissions, day)),
            is_locked=is_locked(day, today=today),
            to_submit=active_unsubmitted_assignments(assignments, day, submissions),
            submitted=submitted_assignments_for_date(assignments, day, submissions),
        )

    def history_page(self, staff_id: int, query: Optional[HistoryQuery] = None) -> HistoryPage:
        query = query or HistoryQuery()
        groups = group_history(self._submissions.list_for_staff(int(staff_id)))
        return paginate(query.apply(groups), query.page, self._page_size)

    def history_rows_ui(self, staff_id: int, query: Optional[HistoryQuery] = None) -> list[dict]:
        page = self.history_page(staff_id, query)
        return [
            {
                "date": g.date_key,
                "display_date": g.display_date,
                "status": self.status_label(g.status),
                "css_class": self.status_css(g.status),
                "total_hours": g.total_hours,
                "verified_hours": g.verified_hours,
                "submissions": len(g.submissions),
            }
            for g in page.items
        ]

    def calendar(self, staff_id: int, *, year: int, month: int, today: date) -> list[CalendarDay]:
        submissions = self._submissions.list_for_staff(int(staff_id))
        return build_calendar_month(submissions, year=year, month=month, today=today)

    def metrics(self, staff_id: int, *, today: date, since: Optional[date] = None) -> DailyMetrics:
        submissions = self._submissions.list_for_staff(int(staff_id))
        return compute_daily_metrics(submissions, today=today, since=since)

    def review_queue(self, *, current_role: Role, target_date: Any = None) -> StatusBuckets:
        self._require_reviewer(current_role)

        submissions = list(self._submissions.list_all())
        if target_date is not None:
            submissions = submissions_for_date(submissions, target_date)
        buckets = bucket_by_status(submissions)
        logger.debug(
            "review queue date=%s pending=%d approved=%d rejected=%d",
            target_date, len(buckets.pending), len(buckets.approved), len(buckets.rejected),
        )
        return buckets

    def staff_analytics(self, *, current_role: Role, staff_id: int, today: date) -> StaffAnalytics:
        self._require_reviewer(current_role)

        start = today - timedelta(days=self._analytics_days)
        submissions = list(self._submissions.list_for_staff(int(staff_id)))
        return StaffAnalytics(
            stats=summarize_period(submissions, start=start, end=today),
            daily=daily_series(submissions, start=start, end=today),
        )

    @staticmethod
    def status_label(status: Union[SubmissionStatus, DayStatus]) -> str:
        return _STATUS_LABELS.get(status.value, status.value)

    @staticmethod
    def status_css(status: Union[SubmissionStatus, DayStatus]) -> str:
        return _STATUS_CSS.get(status.value, "bg-secondary")
