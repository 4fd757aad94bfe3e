from datetime import date

import httpx
import pytest

from hourbook.client import HourbookClient, LatestRequestGuard, WeekSheet
from hourbook.core.errors import StorageError, ValidationError


@pytest.fixture()
def api(client):
    return HourbookClient(client=client)


def test_client_round_trip(api):
    assert api.get_hourly_rate() is None
    api.set_hourly_rate(40)
    assert api.get_hourly_rate() == 40

    monday = date(2025, 2, 3)
    assert api.get_week(monday) is None
    api.save_week(monday, 40, {"monday": 3}, [{"id": "p", "label": "Parking", "amount": 6}])
    snap = api.get_week(monday)
    assert snap.hourly_rate == 40
    assert snap.hours["monday"] == 3
    assert snap.extras == [{"id": "p", "label": "Parking", "amount": 6}]


def test_client_maps_validation_errors(api):
    with pytest.raises(ValidationError) as exc:
        api.set_hourly_rate(-1)
    assert "positive" in exc.value.message


def test_client_maps_server_and_transport_errors():
    def handler(request):
        if request.url.path == "/settings/hourly-rate":
            return httpx.Response(500, json={"error": "Could not load hourly rate"})
        raise httpx.ConnectError("refused", request=request)

    api = HourbookClient(client=httpx.Client(base_url="http://test", transport=httpx.MockTransport(handler)))
    with pytest.raises(StorageError) as exc:
        api.get_hourly_rate()
    assert exc.value.message == "Could not load hourly rate"
    with pytest.raises(StorageError):
        api.get_week(date(2025, 1, 6))


def test_client_discount(api):
    r = api.discount(100, discount_percent=20, vendor_price=100)
    assert r.final_amount == 80
    assert r.commission_percent == 25
    assert api.discount(100).has_vendor_price is False


def test_guard_tracks_latest_per_key():
    guard = LatestRequestGuard()
    a = guard.begin("week")
    rate = guard.begin("rate")
    b = guard.begin("week")
    assert not guard.is_current("week", a)
    assert guard.is_current("week", b)
    assert guard.is_current("rate", rate)


def test_week_sheet_edit_and_save(api):
    sheet = WeekSheet(api)
    sheet.load(date(2025, 2, 6))
    assert sheet.week_start == date(2025, 2, 3)
    assert sheet.breakdown().projected_total == 0

    sheet.set_hours("monday", "8")
    sheet.set_hours("tuesday", "7.5")
    assert sheet.add_extra("", "0") is None
    parking = sheet.add_extra("  ", "12.346")
    assert parking["label"] == "Reimbursement"
    assert parking["amount"] == 12.35

    with pytest.raises(ValidationError):
        sheet.save()

    sheet.save_rate("20")
    sheet.save()

    reloaded = WeekSheet(api)
    reloaded.load_rate()
    reloaded.load(date(2025, 2, 3))
    assert reloaded.hourly_rate == 20
    assert reloaded.hours["tuesday"] == 7.5
    assert reloaded.extras == [parking]
    pay = reloaded.breakdown()
    assert pay.base_pay == 310
    assert pay.projected_total == pytest.approx(322.35)

    reloaded.remove_extra(parking["id"])
    assert reloaded.breakdown().extras_total == 0


def test_week_sheet_unknown_day(api):
    with pytest.raises(ValidationError):
        WeekSheet(api).set_hours("saturday", 3)


def test_week_sheet_navigation(api):
    sheet = WeekSheet(api, week_start=date(2024, 12, 30))
    sheet.next_week()
    assert sheet.week_start == date(2025, 1, 6)
    sheet.previous_week()
    sheet.previous_week()
    assert sheet.week_start == date(2024, 12, 23)


def test_stale_week_response_is_discarded(api):
    api.save_week(date(2025, 1, 6), 20, {"monday": 1}, [])
    api.save_week(date(2025, 1, 13), 20, {"monday": 9}, [])

    sheet = WeekSheet(api)
    real_get_week = api.get_week
    calls = []

    def get_week(week_start):
        calls.append(week_start)
        if len(calls) == 1:
            # user navigates to another week while the first load is in flight
            assert sheet.load(date(2025, 1, 13)) is True
        return real_get_week(week_start)

    api.get_week = get_week
    assert sheet.load(date(2025, 1, 6)) is False

    assert sheet.week_start == date(2025, 1, 13)
    assert sheet.hours["monday"] == 9


def test_failed_stale_week_load_is_swallowed(api):
    api.save_week(date(2025, 1, 13), 20, {"monday": 9}, [])

    sheet = WeekSheet(api)
    real_get_week = api.get_week
    calls = []

    def get_week(week_start):
        calls.append(week_start)
        if len(calls) == 1:
            assert sheet.load(date(2025, 1, 13)) is True
            raise StorageError("Could not load week")
        return real_get_week(week_start)

    api.get_week = get_week
    assert sheet.load(date(2025, 1, 6)) is False
    assert sheet.hours["monday"] == 9


def test_failed_current_week_load_raises(api):
    def get_week(week_start):
        raise StorageError("Could not load week")

    api.get_week = get_week
    sheet = WeekSheet(api)
    sheet.hours["monday"] = 5
    with pytest.raises(StorageError):
        sheet.load(date(2025, 1, 6))
    assert sheet.hours["monday"] == 0
