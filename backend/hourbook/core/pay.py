from dataclasses import dataclass
from typing import Iterable, Mapping

from hourbook.core.constants import WEEKDAYS
from hourbook.core.numbers import finite_or_zero, to_decimal


@dataclass(frozen=True)
class PayBreakdown:
    total_hours: float
    base_pay: float
    extras_total: float
    projected_total: float


def _hours_value(value) -> float:
    # Negative hours are treated like malformed input
    hours = to_decimal(value)
    return hours if hours >= 0 else 0.0


def _extra_amount(extra) -> float:
    if isinstance(extra, Mapping):
        return to_decimal(extra.get("amount"))
    return to_decimal(getattr(extra, "amount", None))


def total_hours(hours: Mapping | None) -> float:
    """Sum Monday..Friday; other keys are ignored."""
    if not isinstance(hours, Mapping):
        hours = {}
    return sum(_hours_value(hours.get(day)) for day in WEEKDAYS)


def extras_total(extras: Iterable | None) -> float:
    if not isinstance(extras, (list, tuple)):
        return 0.0
    return sum(_extra_amount(extra) for extra in extras)


def compute_weekly_pay(hours, hourly_rate, extras) -> PayBreakdown:
    """Turn a week of hours, a rate and extras into pay totals.

    Never raises on malformed numbers: blank strings, NaN, inf and the like
    count as 0. No currency rounding is applied here.
    """
    hours_sum = total_hours(hours)
    rate = to_decimal(hourly_rate)
    base_pay = finite_or_zero(hours_sum * rate)
    extras_sum = finite_or_zero(extras_total(extras))
    return PayBreakdown(
        total_hours=hours_sum,
        base_pay=base_pay,
        extras_total=extras_sum,
        projected_total=finite_or_zero(base_pay + extras_sum),
    )
