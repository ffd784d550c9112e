"""Day-grouped submission history with pagination."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_long_date, parse_iso_date, to_date, to_datetime
from ..common.validators import coerce_id
from ..core.constants import DEFAULT_HISTORY_PAGE_SIZE
from ..core.enums import DayStatus, SubmissionStatus
from ..core.exceptions import ValidationError
from ..submissions.model import WorkSubmission
from .aggregator import get_day_status
from .resolver import resolve_effective_status, submission_date_key


@dataclass(frozen=True)
class HistoryDay:
    date_key: str
    date: date
    display_date: str
    status: DayStatus
    total_hours: float
    verified_hours: float
    pending_hours: float
    rejected_count: int
    submissions: tuple[WorkSubmission, ...]


@dataclass(frozen=True)
class HistoryPage:
    items: tuple[HistoryDay, ...]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class HistoryQuery:
    """Caller-side history view state.

    Any filter change returns a query back on page 1.
    """

    date_filter: Optional[date] = None
    status_filter: Optional[DayStatus] = None
    page: int = 1

    def with_date_filter(self, value: Optional[date]) -> "HistoryQuery":
        return replace(self, date_filter=value, page=1)

    def with_status_filter(self, value: Optional[DayStatus]) -> "HistoryQuery":
        return replace(self, status_filter=value, page=1)

    def with_page(self, page: int) -> "HistoryQuery":
        return replace(self, page=max(int(page), 1))

    def apply(self, groups: Iterable[HistoryDay]) -> list[HistoryDay]:
        out = list(groups)
        if self.date_filter is not None:
            out = [g for g in out if g.date == self.date_filter]
        if self.status_filter is not None:
            out = [g for g in out if g.status == self.status_filter]
        return out


def hours_of(submission: WorkSubmission) -> float:
    return float(submission.hours_worked or 0)


def _id_order(submission: WorkSubmission):
    number = coerce_id(submission.id)
    if number is not None:
        return (0, number, "")
    return (1, 0, str(submission.id))


def _submitted_order(submission: WorkSubmission):
    ts = to_datetime(submission.submitted_at)
    if ts is None:
        ts = datetime.min
    return (ts.replace(tzinfo=None), _id_order(submission))


def collapse_resubmissions(submissions: Iterable[WorkSubmission]) -> list[WorkSubmission]:
    """Drop rejected submissions that a later resubmission replaced.

    A rejected record stays when it is the newest one for its assignment and
    date (nothing was resubmitted yet). Input order is kept for the rest.
    """
    items = list(submissions)
    latest: dict[tuple[int, str], WorkSubmission] = {}
    for s in items:
        aid = coerce_id(s.assignment_id)
        key = submission_date_key(s)
        if aid is None or key is None:
            continue
        current = latest.get((aid, key))
        if current is None or _submitted_order(s) > _submitted_order(current):
            latest[(aid, key)] = s

    out = []
    for s in items:
        aid = coerce_id(s.assignment_id)
        key = submission_date_key(s)
        newest = latest.get((aid, key)) if aid is not None and key is not None else None
        if newest is not None and newest is not s and resolve_effective_status(s) == SubmissionStatus.REJECTED:
            continue
        out.append(s)
    return out


def summarize_day(day_key: str, submissions: Sequence[WorkSubmission]) -> HistoryDay:
    ordered = tuple(sorted(submissions, key=_id_order))
    statuses = [resolve_effective_status(s) for s in ordered]
    d = parse_iso_date(day_key)
    return HistoryDay(
        date_key=day_key,
        date=d,
        display_date=format_long_date(d),
        status=get_day_status(ordered),
        total_hours=sum(hours_of(s) for s in ordered),
        verified_hours=sum(hours_of(s) for s, st in zip(ordered, statuses) if st == SubmissionStatus.VERIFIED),
        pending_hours=sum(
            hours_of(s)
            for s, st in zip(ordered, statuses)
            if st in (SubmissionStatus.SUBMITTED, SubmissionStatus.PENDING)
        ),
        rejected_count=sum(1 for st in statuses if st == SubmissionStatus.REJECTED),
        submissions=ordered,
    )


def group_history(
    submissions: Iterable[WorkSubmission],
    *,
    collapse: bool = False,
) -> list[HistoryDay]:
    """Group submissions by work date, most recent day first.

    Submissions without a readable date are left out. With ``collapse`` a
    rejected submission that was later resubmitted is dropped first.
    """
    items = collapse_resubmissions(submissions) if collapse else list(submissions)

    by_day: dict[str, list[WorkSubmission]] = defaultdict(list)
    for s in items:
        key = submission_date_key(s)
        if key is None:
            continue
        by_day[key].append(s)

    groups = [summarize_day(key, subs) for key, subs in by_day.items()]
    groups.sort(key=lambda g: g.date, reverse=True)
    return groups


def paginate(
    groups: Sequence[HistoryDay],
    page: int = 1,
    page_size: int = DEFAULT_HISTORY_PAGE_SIZE,
) -> HistoryPage:
    if int(page_size) < 1:
        raise ValidationError("Page size must be at least 1")
    page_size = int(page_size)
    page = max(int(page), 1)

    total = len(groups)
    start = (page - 1) * page_size
    return HistoryPage(
        items=tuple(groups[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=total,
        total_pages=math.ceil(total / page_size),
    )


def filter_by_range(
    groups: Iterable[HistoryDay],
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[HistoryDay]:
    start_d = to_date(start) if start is not None else None
    end_d = to_date(end) if end is not None else None
    return [
        g for g in groups
        if (start_d is None or g.date >= start_d) and (end_d is None or g.date <= end_d)
    ]
