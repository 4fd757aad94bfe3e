"""HTTP client for the Hourbook API plus an editable week sheet.

`WeekSheet` is the state behind the hours screen: it loads a week and the
saved rate, tracks edits, prices the week, and saves it back. Responses
that arrive after a newer load for the same resource are dropped.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

import httpx

from hourbook.core.config import settings
from hourbook.core.constants import DEFAULT_EXTRA_LABEL, WEEKDAYS
from hourbook.core.discount import DiscountResult
from hourbook.core.errors import StorageError, ValidationError
from hourbook.core.numbers import round_money, to_decimal
from hourbook.core.pay import PayBreakdown, compute_weekly_pay
from hourbook.core.week_utils import monday_of, shift_week, week_key
from hourbook.repository import WeeklyLogSnapshot
from hourbook.services.hours import generate_extra_id, normalize_extras, normalize_hours

log = logging.getLogger(__name__)


class HourbookClient:
    def __init__(self, client: Optional[httpx.Client] = None, base_url: Optional[str] = None):
        self.http = client or httpx.Client(
            base_url=base_url or settings.api_base_url,
            timeout=30,
        )

    def close(self):
        self.http.close()

    def _request(self, method: str, path: str, failure: str, **kwargs) -> dict:
        try:
            r = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise StorageError(failure) from e
        if r.status_code == 400:
            raise ValidationError(_error_message(r, failure))
        if r.status_code >= 300:
            raise StorageError(_error_message(r, failure))
        return r.json()

    def get_hourly_rate(self) -> Optional[float]:
        data = self._request("GET", "/settings/hourly-rate", "Could not load hourly rate")
        value = data.get("numeric_value")
        return None if value is None else float(value)

    def set_hourly_rate(self, value: float) -> None:
        self._request(
            "PUT",
            "/settings/hourly-rate",
            "Could not save hourly rate",
            json={"numeric_value": value},
        )

    def get_week(self, week_start: date) -> Optional[WeeklyLogSnapshot]:
        body = self._request(
            "GET",
            "/weekly-logs",
            "Could not load week",
            params={"week_start": week_key(week_start)},
        )
        data = body.get("data")
        if data is None:
            return None
        return WeeklyLogSnapshot(
            week_start=week_start,
            hourly_rate=to_decimal(data.get("hourly_rate")),
            hours=dict(data.get("hours") or {}),
            extras=list(data.get("extras") or []),
        )

    def save_week(self, week_start: date, hourly_rate: float, hours: dict, extras: list) -> None:
        self._request(
            "PUT",
            "/weekly-logs",
            "Could not save week",
            json={
                "week_start": week_key(week_start),
                "hourly_rate": hourly_rate,
                "hours": hours,
                "extras": extras,
            },
        )

    def discount(self, amount, tax_percent=0, discount_percent=0, vendor_price=0) -> DiscountResult:
        data = self._request(
            "POST",
            "/calculator/discount",
            "Could not calculate discount",
            json={
                "amount": amount,
                "tax_percent": tax_percent,
                "discount_percent": discount_percent,
                "vendor_price": vendor_price,
            },
        )
        return DiscountResult(
            after_tax=data["after_tax"],
            discount_amount=data["discount_amount"],
            final_amount=data["final_amount"],
            difference=data.get("difference", 0.0),
            commission_percent=data.get("commission_percent", 0.0),
            has_vendor_price=data["has_vendor_price"],
        )


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        return response.json().get("error") or fallback
    except ValueError:
        return fallback


class LatestRequestGuard:
    """Tracks the newest request per resource so older responses can be ignored."""

    def __init__(self):
        self._lock = threading.Lock()
        self._generations: dict[str, int] = {}

    def begin(self, key: str) -> int:
        with self._lock:
            token = self._generations.get(key, 0) + 1
            self._generations[key] = token
            return token

    def is_current(self, key: str, token: int) -> bool:
        with self._lock:
            return self._generations.get(key) == token


@dataclass
class WeekSheet:
    client: HourbookClient
    week_start: date = field(default_factory=lambda: monday_of(date.today()))
    hourly_rate: float = 0.0
    hours: dict = field(default_factory=lambda: normalize_hours({}))
    extras: list = field(default_factory=list)
    guard: LatestRequestGuard = field(default_factory=LatestRequestGuard)

    def load(self, any_day: Optional[date] = None) -> bool:
        """Fetch the week containing `any_day`; False if the response went stale."""
        if any_day is not None:
            self.week_start = monday_of(any_day)
        week = self.week_start
        token = self.guard.begin("week")
        try:
            snapshot = self.client.get_week(week)
        except StorageError:
            if not self.guard.is_current("week", token):
                log.debug("ignoring failed stale load for week %s", week_key(week))
                return False
            self.hours = normalize_hours({})
            self.extras = []
            raise
        if not self.guard.is_current("week", token):
            log.debug("discarding stale response for week %s", week_key(week))
            return False
        if snapshot is None:
            self.hours = normalize_hours({})
            self.extras = []
        else:
            self.hours = normalize_hours(snapshot.hours)
            self.extras = normalize_extras(snapshot.extras)
        return True

    def load_rate(self) -> bool:
        token = self.guard.begin("rate")
        try:
            rate = self.client.get_hourly_rate()
        except StorageError:
            if not self.guard.is_current("rate", token):
                return False
            raise
        if not self.guard.is_current("rate", token):
            log.debug("discarding stale hourly rate response")
            return False
        if rate is not None:
            self.hourly_rate = rate
        return True

    def next_week(self) -> bool:
        return self.load(shift_week(self.week_start, 1))

    def previous_week(self) -> bool:
        return self.load(shift_week(self.week_start, -1))

    def set_hours(self, day: str, value) -> None:
        if day not in WEEKDAYS:
            raise ValidationError(f"Unknown weekday: {day}")
        self.hours[day] = to_decimal(value)

    def add_extra(self, label: str, amount) -> Optional[dict]:
        """Append an extra; a zero/blank amount is ignored and returns None."""
        cleaned = to_decimal(amount)
        if cleaned == 0:
            return None
        label = (label or "").strip() or DEFAULT_EXTRA_LABEL
        extra = {"id": generate_extra_id(), "label": label, "amount": round(cleaned, 2)}
        self.extras.append(extra)
        return extra

    def remove_extra(self, extra_id: str) -> None:
        self.extras = [item for item in self.extras if item["id"] != extra_id]

    def save_rate(self, value) -> float:
        rate = round_money(value)
        if rate <= 0:
            raise ValidationError("Enter an hourly rate above 0.")
        self.client.set_hourly_rate(rate)
        self.hourly_rate = rate
        return rate

    def save(self) -> None:
        if self.hourly_rate <= 0:
            raise ValidationError("Enter and save an hourly rate first.")
        self.client.save_week(
            self.week_start,
            round_money(self.hourly_rate),
            normalize_hours(self.hours),
            list(self.extras),
        )

    def breakdown(self) -> PayBreakdown:
        return compute_weekly_pay(self.hours, self.hourly_rate, self.extras)
