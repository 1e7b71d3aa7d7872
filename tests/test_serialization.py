from __future__ import annotations

from loe_status.core.models import ElectricityStatus, Interval
from loe_status.core.serialization import intervals_to_payload, optional_isoformat, status_to_payload
from tests.helpers import at


def test_status_payload_shape() -> None:
    payload = status_to_payload(
        ElectricityStatus(
            is_on=False,
            minutes_until_change=180,
            is_tomorrow=True,
            tomorrow_first_outage_label="00:00",
            has_tomorrow_schedule=True,
        )
    )

    assert payload == {
        "state": "off",
        "isOn": False,
        "minutesUntilChange": 180,
        "isTomorrow": True,
        "tomorrowFirstOutage": "00:00",
        "hasTomorrowSchedule": True,
    }


def test_intervals_payload_uses_isoformat() -> None:
    payload = intervals_to_payload([Interval(start=at("23:00"), end=at("00:00", days=1))])

    assert payload == [{"start": "2026-02-18T23:00:00+02:00", "end": "2026-02-19T00:00:00+02:00"}]


def test_optional_isoformat() -> None:
    assert optional_isoformat(None) is None
    assert optional_isoformat(at("07:45")) == "2026-02-18T07:45:00+02:00"
