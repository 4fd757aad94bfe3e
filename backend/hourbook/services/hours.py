"""Settings and weekly-log operations on top of a `PayRepository`.

Validation happens here so the HTTP layer, scripts and tests share the
same rules; storage failures propagate as `StorageError` untouched.
"""

import math
import uuid
from datetime import date
from typing import Mapping, Optional

from hourbook.core.constants import (
    DEFAULT_EXTRA_LABEL,
    HOURLY_RATE_SETTING,
    WEEKDAYS,
)
from hourbook.core.errors import ValidationError
from hourbook.core.numbers import round_money, to_decimal
from hourbook.core.week_utils import parse_week_key
from hourbook.repository import PayRepository, WeeklyLogSnapshot


def generate_extra_id() -> str:
    return str(uuid.uuid4())


def normalize_hours(hours) -> dict:
    """All five weekdays, coerced and rounded to 2 places; other keys dropped."""
    if not isinstance(hours, Mapping):
        hours = {}
    return {day: round_money(hours.get(day)) for day in WEEKDAYS}


def normalize_extras(extras) -> list:
    """Keep caller order and ids; fill in missing ids and labels.

    Anything other than a list or tuple counts as no extras.
    """
    if not isinstance(extras, (list, tuple)):
        return []
    items = []
    for item in extras:
        if not isinstance(item, Mapping):
            item = {}
        extra_id = item.get("id")
        if not isinstance(extra_id, str) or not extra_id:
            extra_id = generate_extra_id()
        label = item.get("label")
        if not isinstance(label, str) or not label.strip():
            label = DEFAULT_EXTRA_LABEL
        items.append(
            {"id": extra_id, "label": label, "amount": to_decimal(item.get("amount"))}
        )
    return items


def _coerce_week_start(week_start) -> date:
    if week_start is None or week_start == "":
        raise ValidationError("week_start is required")
    if isinstance(week_start, date):
        return week_start
    try:
        return parse_week_key(week_start)
    except ValueError:
        raise ValidationError("week_start must be a date in YYYY-MM-DD format")


def get_hourly_rate(repo: PayRepository) -> Optional[float]:
    return repo.get_setting(HOURLY_RATE_SETTING)


def set_hourly_rate(repo: PayRepository, value) -> float:
    """Validate and store the hourly rate; returns the stored value."""
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or not math.isfinite(value)
    ):
        raise ValidationError("numeric_value must be a positive number")
    if value <= 0:
        raise ValidationError("numeric_value must be a positive number")
    rate = float(value)
    repo.upsert_setting(HOURLY_RATE_SETTING, rate)
    return rate


def get_week(repo: PayRepository, week_start: date) -> Optional[WeeklyLogSnapshot]:
    """Look up a week by its Monday. Does not normalize the date."""
    return repo.get_week(week_start)


def save_week(
    repo: PayRepository,
    week_start,
    hourly_rate,
    hours,
    extras,
) -> date:
    """Upsert one week; returns the parsed week_start."""
    week = _coerce_week_start(week_start)
    if week.weekday() != 0:
        raise ValidationError("week_start must be a Monday")

    rate = round_money(hourly_rate)
    if rate < 0:
        raise ValidationError("hourly_rate must not be negative")

    repo.upsert_week(
        week_start=week,
        hourly_rate=rate,
        hours=normalize_hours(hours),
        extras=normalize_extras(extras),
    )
    return week
