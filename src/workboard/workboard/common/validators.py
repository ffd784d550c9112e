from __future__ import annotations

import math
from typing import Any, Optional

from ..core.constants import MAX_HOURS_PER_DAY
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_hours(value: Any, *, max_hours: float = MAX_HOURS_PER_DAY) -> float:
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Please enter valid hours worked")
    if math.isnan(hours) or hours <= 0:
        raise ValidationError("Please enter valid hours worked")
    if hours > max_hours:
        raise ValidationError(f"Hours cannot exceed {max_hours:g}")
    return hours


def coerce_id(value: Any) -> Optional[int]:
    """Numeric value of an API identifier, or None when it has none.

    The API sends ids as numbers or strings; both sides of every id
    comparison go through this.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def same_id(left: Any, right: Any) -> bool:
    a = coerce_id(left)
    return a is not None and a == coerce_id(right)
