from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Extra(BaseModel):
    id: str
    label: str
    amount: float


class WeeklyLogData(BaseModel):
    hourly_rate: float
    hours: dict[str, float]
    extras: list[Extra]

    model_config = ConfigDict(from_attributes=True)


class WeeklyLogEnvelope(BaseModel):
    data: Optional[WeeklyLogData] = None


class WeeklyLogUpsert(BaseModel):
    """Body of PUT /weekly-logs.

    Fields are deliberately loose: malformed numbers are coerced to 0 and
    only a missing/invalid week_start is rejected.
    """

    week_start: Any = None
    hourly_rate: Any = 0
    hours: Any = None
    extras: Any = None

    model_config = ConfigDict(extra="ignore")


class WeekSummary(BaseModel):
    week_start: date
    week_label: str
    saved: bool
    hourly_rate: float
    hours: dict[str, float]
    extras: list[Extra]
    total_hours: float
    base_pay: float
    extras_total: float
    projected_total: float

    # en-US display strings, e.g. "25.50" and "$1,234.50"
    hourly_rate_display: str
    base_pay_display: str
    extras_total_display: str
    projected_total_display: str


class SuccessResponse(BaseModel):
    success: bool = True
