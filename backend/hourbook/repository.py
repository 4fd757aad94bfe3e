"""Persistence for settings and weekly logs.

`PayRepository` is the seam the services depend on; the SQLAlchemy
implementation is constructed per request from a session and injected
through FastAPI's dependency system.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from hourbook.core.errors import StorageError
from hourbook.models.setting import Setting
from hourbook.models.weekly_log import WeeklyLog

log = logging.getLogger(__name__)


@dataclass
class WeeklyLogSnapshot:
    week_start: date
    hourly_rate: float
    hours: dict
    extras: list = field(default_factory=list)
    inserted_at: Optional[datetime] = None


class PayRepository(ABC):
    @abstractmethod
    def get_setting(self, name: str) -> Optional[float]:
        ...

    @abstractmethod
    def upsert_setting(self, name: str, value: float) -> None:
        ...

    @abstractmethod
    def get_week(self, week_start: date) -> Optional[WeeklyLogSnapshot]:
        ...

    @abstractmethod
    def upsert_week(
        self,
        week_start: date,
        hourly_rate: float,
        hours: dict,
        extras: list,
    ) -> None:
        ...


class SqlAlchemyPayRepository(PayRepository):
    def __init__(self, db: Session):
        self.db = db

    def get_setting(self, name: str) -> Optional[float]:
        try:
            row = self.db.query(Setting).filter(Setting.name == name).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Could not load setting {name}") from e
        if row is None or row.numeric_value is None:
            return None
        return float(row.numeric_value)

    def upsert_setting(self, name: str, value: float) -> None:
        try:
            row = self.db.query(Setting).filter(Setting.name == name).first()
            if not row:
                row = Setting(name=name, numeric_value=value)
                self.db.add(row)
            else:
                row.numeric_value = value
                row.updated_at = func.now()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Could not save setting {name}") from e
        log.info("setting %s updated", name)

    def get_week(self, week_start: date) -> Optional[WeeklyLogSnapshot]:
        try:
            row = (
                self.db.query(WeeklyLog)
                .filter(WeeklyLog.week_start == week_start)
                .first()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("Could not load week") from e
        if not row:
            return None
        return WeeklyLogSnapshot(
            week_start=row.week_start,
            hourly_rate=float(row.hourly_rate or 0),
            hours=dict(row.hours or {}),
            extras=list(row.extras or []),
            inserted_at=row.inserted_at,
        )

    def upsert_week(
        self,
        week_start: date,
        hourly_rate: float,
        hours: dict,
        extras: list,
    ) -> None:
        try:
            row = (
                self.db.query(WeeklyLog)
                .filter(WeeklyLog.week_start == week_start)
                .first()
            )
            if not row:
                row = WeeklyLog(
                    week_start=week_start,
                    hourly_rate=hourly_rate,
                    hours=hours,
                    extras=extras,
                )
                self.db.add(row)
            else:
                # inserted_at is left as first written
                row.hourly_rate = hourly_rate
                row.hours = hours
                row.extras = extras
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("Could not save week") from e
        log.info("weekly log %s saved", week_start.isoformat())
