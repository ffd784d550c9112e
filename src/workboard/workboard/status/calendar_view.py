"""Month calendar and daily metric cards for the staff work calendar.

"Today" is always passed in so past-day locking can be tested against a
fixed date.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable, Optional

from ..common.datetime_utils import to_date
from ..core.enums import DayStatus, SubmissionStatus
from ..submissions.model import WorkSubmission
from .history import HistoryDay, group_history
from .resolver import resolve_effective_status


@dataclass(frozen=True)
class CalendarDay:
    date: date
    status: DayStatus
    total_hours: float
    verified_hours: float
    is_locked: bool
    is_future: bool
    has_submissions: bool


@dataclass(frozen=True)
class DailyMetrics:
    today_status: DayStatus
    today_hours: float
    today_verified_hours: float
    verified_days_count: int
    missed_days_count: int
    total_submitted_days: int
    total_rejected_count: int


def _day(value: Any) -> Optional[date]:
    return to_date(value)


def is_today(value: Any, *, today: date) -> bool:
    d = _day(value)
    return d is not None and d == today


def is_past_date(value: Any, *, today: date) -> bool:
    d = _day(value)
    return d is not None and d < today


def is_future_date(value: Any, *, today: date) -> bool:
    d = _day(value)
    return d is not None and d > today


def is_locked(value: Any, *, today: date) -> bool:
    """Past days are locked: staff can no longer submit for them."""
    return is_past_date(value, today=today)


def _by_date(submissions: Iterable[WorkSubmission]) -> dict[date, HistoryDay]:
    return {g.date: g for g in group_history(submissions)}


def build_calendar_month(
    submissions: Iterable[WorkSubmission],
    *,
    year: int,
    month: int,
    today: date,
) -> list[CalendarDay]:
    groups = _by_date(submissions)
    _, days_in_month = calendar.monthrange(year, month)

    out = []
    for day_no in range(1, days_in_month + 1):
        d = date(year, month, day_no)
        g = groups.get(d)
        out.append(
            CalendarDay(
                date=d,
                status=g.status if g else DayStatus.NOT_SUBMITTED,
                total_hours=g.total_hours if g else 0.0,
                verified_hours=g.verified_hours if g else 0.0,
                is_locked=d < today,
                is_future=d > today,
                has_submissions=bool(g and g.submissions),
            )
        )
    return out


def compute_daily_metrics(
    submissions: Iterable[WorkSubmission],
    *,
    today: date,
    since: Optional[date] = None,
) -> DailyMetrics:
    """Figures for the staff dashboard cards.

    Missed days count the days from ``since`` up to yesterday that have no
    submission at all; without ``since`` nothing is counted as missed.
    """
    items = list(submissions)
    groups = _by_date(items)
    today_group = groups.get(today)

    missed = 0
    if since is not None:
        d = since
        while d < today:
            if d not in groups:
                missed += 1
            d += timedelta(days=1)

    return DailyMetrics(
        today_status=today_group.status if today_group else DayStatus.NOT_SUBMITTED,
        today_hours=today_group.total_hours if today_group else 0.0,
        today_verified_hours=today_group.verified_hours if today_group else 0.0,
        verified_days_count=sum(1 for g in groups.values() if g.status == DayStatus.VERIFIED),
        missed_days_count=missed,
        total_submitted_days=len(groups),
        total_rejected_count=sum(1 for s in items if resolve_effective_status(s) == SubmissionStatus.REJECTED),
    )
