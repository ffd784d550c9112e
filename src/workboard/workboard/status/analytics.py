"""Per-staff analytics used by the manager staff detail and review pages."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from ..common.datetime_utils import to_date
from ..core.enums import SubmissionStatus
from ..submissions.model import WorkSubmission
from .history import hours_of
from .resolver import resolve_effective_status

_PENDING = (SubmissionStatus.SUBMITTED, SubmissionStatus.PENDING)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class StatusBuckets:
    pending: tuple[WorkSubmission, ...]
    approved: tuple[WorkSubmission, ...]
    rejected: tuple[WorkSubmission, ...]


@dataclass(frozen=True)
class SubmissionStats:
    total: int
    verified: int
    pending: int
    rejected: int
    total_hours: float
    verified_hours: float
    approval_rate: int


@dataclass(frozen=True)
class DailyPoint:
    date: date
    submissions: int
    verified: int
    pending: int
    rejected: int
    hours: float


def bucket_by_status(submissions: Iterable[WorkSubmission]) -> StatusBuckets:
    pending, approved, rejected = [], [], []
    for s in submissions:
        status = resolve_effective_status(s)
        if status == SubmissionStatus.VERIFIED:
            approved.append(s)
        elif status == SubmissionStatus.REJECTED:
            rejected.append(s)
        else:
            pending.append(s)
    return StatusBuckets(pending=tuple(pending), approved=tuple(approved), rejected=tuple(rejected))


def _in_range(submissions: Iterable[WorkSubmission], start: date, end: date) -> list[WorkSubmission]:
    out = []
    for s in submissions:
        d = to_date(s.effective_date_value)
        if d is not None and start <= d <= end:
            out.append(s)
    return out


def summarize_period(submissions: Iterable[WorkSubmission], *, start: date, end: date) -> SubmissionStats:
    items = _in_range(submissions, start, end)
    statuses = [resolve_effective_status(s) for s in items]

    total = len(items)
    verified = sum(1 for st in statuses if st == SubmissionStatus.VERIFIED)
    return SubmissionStats(
        total=total,
        verified=verified,
        pending=sum(1 for st in statuses if st in _PENDING),
        rejected=sum(1 for st in statuses if st == SubmissionStatus.REJECTED),
        total_hours=sum(hours_of(s) for s in items),
        verified_hours=sum(hours_of(s) for s, st in zip(items, statuses) if st == SubmissionStatus.VERIFIED),
        approval_rate=_round_half_up(verified / total * 100) if total else 0,
    )


def daily_series(submissions: Iterable[WorkSubmission], *, start: date, end: date) -> list[DailyPoint]:
    items = _in_range(submissions, start, end)
    by_day: dict[date, list[WorkSubmission]] = {}
    for s in items:
        by_day.setdefault(to_date(s.effective_date_value), []).append(s)

    points = []
    d = start
    while d <= end:
        day_items = by_day.get(d, [])
        statuses = [resolve_effective_status(s) for s in day_items]
        points.append(
            DailyPoint(
                date=d,
                submissions=len(day_items),
                verified=sum(1 for st in statuses if st == SubmissionStatus.VERIFIED),
                pending=sum(1 for st in statuses if st in _PENDING),
                rejected=sum(1 for st in statuses if st == SubmissionStatus.REJECTED),
                hours=_round_half_up(sum(hours_of(s) for s in day_items) * 10) / 10,
            )
        )
        d += timedelta(days=1)
    return points
