#!/usr/bin/env python3
"""
Seed a block of weeks into the Hourbook API.

Pattern per week (Mon–Fri):
  - Mon..Thu: a regular day, Fri: a short day
  - one mileage reimbursement every week

Usage examples:
  - Against a local backend:
      python scripts/seed_weeks.py --base-url http://localhost:8000
  - Eight weeks at a custom rate:
      python scripts/seed_weeks.py --base-url http://localhost:8000 --weeks 8 --rate 41.25
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys
import uuid
from typing import Dict

import requests


DAY_HOURS = {"monday": 8.0, "tuesday": 8.0, "wednesday": 7.5, "thursday": 8.0, "friday": 5.0}


def monday_of_week(d: dt.date) -> dt.date:
    return d - dt.timedelta(days=d.weekday())


def put_json(base_url: str, path: str, payload: dict) -> None:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.put(url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")


def week_payload(week_start: dt.date, rate: float, scale: float) -> Dict:
    hours = {day: round(h * scale, 2) for day, h in DAY_HOURS.items()}
    return {
        "week_start": week_start.isoformat(),
        "hourly_rate": rate,
        "hours": hours,
        "extras": [
            {"id": str(uuid.uuid4()), "label": "Mileage", "amount": round(18.4 * scale, 2)},
        ],
    }


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed weekly logs and the hourly rate")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--weeks", type=int, default=12, help="Number of weeks ending with the current one")
    ap.add_argument("--rate", type=float, default=35.0, help="Hourly rate to save")
    args = ap.parse_args()

    if args.weeks < 1 or args.rate <= 0:
        print("--weeks must be >= 1 and --rate must be > 0", file=sys.stderr)
        sys.exit(2)

    put_json(args.base_url, "settings/hourly-rate", {"numeric_value": args.rate})

    this_monday = monday_of_week(dt.date.today())
    week_starts = [this_monday - dt.timedelta(weeks=args.weeks - 1 - i) for i in range(args.weeks)]

    for i, ws in enumerate(week_starts):
        # Alternate full and lighter weeks
        scale = 1.0 if i % 2 == 0 else 0.8
        put_json(args.base_url, "weekly-logs", week_payload(ws, args.rate, scale))

    print(f"Seed complete: {args.weeks} weeks created.")


if __name__ == "__main__":
    main()
