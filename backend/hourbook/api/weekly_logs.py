from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from hourbook.api.deps import get_repository
from hourbook.core.errors import ValidationError
from hourbook.core.pay import compute_weekly_pay
from hourbook.core.week_utils import (
    format_currency,
    format_rate,
    monday_of,
    parse_week_key,
    week_range_label,
)
from hourbook.repository import PayRepository
from hourbook.schemas.weekly_log import (
    SuccessResponse,
    WeeklyLogData,
    WeeklyLogEnvelope,
    WeeklyLogUpsert,
    WeekSummary,
)
from hourbook.services import hours as hours_service


router = APIRouter(prefix="/weekly-logs", tags=["weekly-logs"])


def _parse_query_date(value: Optional[str], name: str) -> date:
    if not value:
        raise ValidationError(f"{name} query param is required")
    try:
        return parse_week_key(value)
    except ValueError:
        raise ValidationError(f"{name} must be a date in YYYY-MM-DD format")


@router.get("", response_model=WeeklyLogEnvelope)
def read_week(
    week_start: Optional[str] = Query(None),
    repo: PayRepository = Depends(get_repository),
):
    wk = _parse_query_date(week_start, "week_start")
    snapshot = hours_service.get_week(repo, wk)
    if snapshot is None:
        return WeeklyLogEnvelope(data=None)
    return WeeklyLogEnvelope(
        data=WeeklyLogData(
            hourly_rate=snapshot.hourly_rate,
            hours=hours_service.normalize_hours(snapshot.hours),
            extras=hours_service.normalize_extras(snapshot.extras),
        )
    )


@router.put("", response_model=SuccessResponse)
def upsert_week(
    payload: WeeklyLogUpsert,
    repo: PayRepository = Depends(get_repository),
):
    hours_service.save_week(
        repo,
        week_start=payload.week_start,
        hourly_rate=payload.hourly_rate,
        hours=payload.hours,
        extras=payload.extras,
    )
    return SuccessResponse()


@router.get("/summary", response_model=WeekSummary)
def read_week_summary(
    date_: Optional[str] = Query(None, alias="date"),
    repo: PayRepository = Depends(get_repository),
):
    """
    Week totals for any day in the week.

    A saved week is priced at its own rate snapshot; an unsaved one shows
    zero hours at the live hourly rate.
    """
    wk = monday_of(_parse_query_date(date_, "date"))
    snapshot = hours_service.get_week(repo, wk)
    if snapshot is not None:
        rate = snapshot.hourly_rate
        hours = hours_service.normalize_hours(snapshot.hours)
        extras = hours_service.normalize_extras(snapshot.extras)
    else:
        rate = hours_service.get_hourly_rate(repo) or 0.0
        hours = hours_service.normalize_hours({})
        extras = []

    pay = compute_weekly_pay(hours, rate, extras)
    return WeekSummary(
        week_start=wk,
        week_label=week_range_label(wk),
        saved=snapshot is not None,
        hourly_rate=rate,
        hours=hours,
        extras=extras,
        total_hours=pay.total_hours,
        base_pay=pay.base_pay,
        extras_total=pay.extras_total,
        projected_total=pay.projected_total,
        hourly_rate_display=format_rate(rate),
        base_pay_display=format_currency(pay.base_pay),
        extras_total_display=format_currency(pay.extras_total),
        projected_total_display=format_currency(pay.projected_total),
    )
