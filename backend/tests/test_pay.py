import math

import pytest

from hourbook.core.pay import compute_weekly_pay, total_hours


def test_projected_total_is_base_plus_extras():
    hours = {"monday": 8, "tuesday": 7.25, "wednesday": 6.5, "thursday": 8, "friday": 4.75}
    extras = [{"amount": 12.5}, {"amount": -2.25}]
    pay = compute_weekly_pay(hours, 31.4, extras)

    assert pay.total_hours == pytest.approx(34.5)
    assert pay.extras_total == pytest.approx(10.25)
    assert abs(pay.total_hours * 31.4 + pay.extras_total - pay.projected_total) < 1e-9


def test_missing_days_count_as_zero():
    pay = compute_weekly_pay({"wednesday": 5}, 20, [])
    assert pay.total_hours == 5
    assert pay.base_pay == 100
    assert pay.projected_total == 100


def test_malformed_values_degrade_to_zero():
    hours = {
        "monday": "",
        "tuesday": "abc",
        "wednesday": float("nan"),
        "thursday": float("inf"),
        "friday": "3.5",
    }
    extras = [{"amount": "nope"}, {"amount": float("inf")}, {}, {"amount": "2"}]
    pay = compute_weekly_pay(hours, "not a rate", extras)

    assert pay.total_hours == 3.5
    assert pay.base_pay == 0
    assert pay.extras_total == 2
    assert pay.projected_total == 2
    assert all(math.isfinite(v) for v in (pay.total_hours, pay.base_pay, pay.projected_total))


def test_negative_hours_and_weekend_keys_ignored():
    assert total_hours({"monday": -4, "saturday": 9, "friday": 2}) == 2


def test_none_inputs():
    pay = compute_weekly_pay(None, None, None)
    assert pay.projected_total == 0


def test_extras_objects_with_amount_attribute():
    class Item:
        def __init__(self, amount):
            self.amount = amount

    pay = compute_weekly_pay({}, 10, [Item(4), Item("1.5")])
    assert pay.extras_total == 5.5
