from datetime import date, timedelta
import random

from hourbook.core.constants import WEEKDAYS
from hourbook.core.week_utils import monday_of
from hourbook.db import Base, SessionLocal, engine
from hourbook.repository import SqlAlchemyPayRepository
from hourbook.services import hours as hours_service

DEMO_RATE = 32.5


def seed_demo_weeks(repo, weeks: int = 8) -> None:
    """Save `weeks` weeks of demo hours ending with the current week."""
    this_monday = monday_of(date.today())
    hours_service.set_hourly_rate(repo, DEMO_RATE)

    for i in range(weeks):
        week_start = this_monday - timedelta(weeks=weeks - 1 - i)
        hours = {day: round(random.uniform(6.0, 9.0), 2) for day in WEEKDAYS}
        extras = []
        # Every other week gets a parking reimbursement
        if i % 2 == 0:
            extras.append({"label": "Parking", "amount": 12.0})
        hours_service.save_week(repo, week_start, DEMO_RATE, hours, extras)

    print(f"Seeded {weeks} demo weeks")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_demo_weeks(SqlAlchemyPayRepository(db))
    finally:
        db.close()


if __name__ == "__main__":
    main()
