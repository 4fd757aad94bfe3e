from datetime import date, timedelta

from hourbook.core.constants import CURRENCY_SYMBOL
from hourbook.core.numbers import to_decimal

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def monday_of(d: date) -> date:
    # Monday = 0, Sunday = 6
    return d - timedelta(days=d.weekday())


def shift_week(week_start: date, delta: int) -> date:
    """Move `delta` weeks forward (negative for back), landing on a Monday."""
    return monday_of(week_start + timedelta(weeks=delta))


def week_key(d: date) -> str:
    """date -> 'YYYY-MM-DD', the persisted form of week_start."""
    return d.isoformat()


def parse_week_key(value: str) -> date:
    """
    Parse 'YYYY-MM-DD' -> date.
    Raises ValueError for anything else.
    """
    if not isinstance(value, str) or len(value.strip()) != 10:
        raise ValueError("week_start must be in YYYY-MM-DD format")
    return date.fromisoformat(value.strip())


def week_range_label(week_start: date) -> str:
    """
    Monday..Friday span for headers.
    Example: 2025-01-06 -> 'Jan 6 – Jan 10'
    """
    week_end = week_start + timedelta(days=4)
    return (
        f"{_MONTHS[week_start.month - 1]} {week_start.day} – "
        f"{_MONTHS[week_end.month - 1]} {week_end.day}"
    )


def format_currency(value) -> str:
    """
    en-US dollars with two decimals.
    Example: 1234.5 -> '$1,234.50', -5 -> '-$5.00'
    """
    amount = to_decimal(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def format_rate(value) -> str:
    """Whole rates print without decimals ('25'), others with two ('25.50')."""
    rate = round(to_decimal(value), 2)
    if rate % 1 == 0:
        return str(int(rate))
    return f"{rate:.2f}"


def format_percent(value) -> str:
    """Signed percentage with one decimal, e.g. 25 -> '+25.0%'."""
    pct = to_decimal(value)
    sign = "+" if pct >= 0 else ""
    return f"{sign}{pct:.1f}%"
