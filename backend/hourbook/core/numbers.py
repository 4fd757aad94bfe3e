import math

from hourbook.core.constants import MONEY_PLACES


def to_decimal(value) -> float:
    """Lenient number parsing used for every user-entered amount.

    Finite ints/floats pass through; non-blank strings are parsed; anything
    else (None, blank, NaN, inf, booleans, garbage) becomes 0.
    Example: ' 7.5 ' -> 7.5, '' -> 0.0, 'abc' -> 0.0
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        value = float(value)
        return value if math.isfinite(value) else 0.0
    if isinstance(value, str) and value.strip():
        try:
            parsed = float(value.strip())
        except ValueError:
            return 0.0
        return parsed if math.isfinite(parsed) else 0.0
    # Decimal from Numeric columns
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return 0.0
    return parsed if math.isfinite(parsed) else 0.0


def round_money(value) -> float:
    """Coerce then round to 2 places, e.g. 7.456 -> 7.46."""
    return round(to_decimal(value), MONEY_PLACES)


def finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0
