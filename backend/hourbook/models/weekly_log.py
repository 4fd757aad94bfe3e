import uuid

from sqlalchemy import JSON, Column, Date, DateTime, Numeric, String
from sqlalchemy.sql import func
from hourbook.db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class WeeklyLog(Base):
    __tablename__ = "weekly_logs"

    id = Column(String(36), primary_key=True, default=_new_id)

    # Monday of the week, unique per week
    week_start = Column(Date, unique=True, index=True, nullable=False)

    # Rate in effect when the week was saved; not tied to the live setting
    hourly_rate = Column(Numeric(10, 2), nullable=False, default=0)

    # {"monday": 7.5, ..., "friday": 8.0}
    hours = Column(JSON, nullable=False, default=dict)

    # [{"id": "...", "label": "Parking", "amount": 12.5}, ...] in entry order
    extras = Column(JSON, nullable=False, default=list)

    inserted_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
