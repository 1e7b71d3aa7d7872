from __future__ import annotations

from datetime import datetime

from loe_status.core.models import ElectricityStatus, Interval


def status_to_payload(status: ElectricityStatus) -> dict:
    return {
        "state": status.state.value,
        "isOn": status.is_on,
        "minutesUntilChange": status.minutes_until_change,
        "isTomorrow": status.is_tomorrow,
        "tomorrowFirstOutage": status.tomorrow_first_outage_label,
        "hasTomorrowSchedule": status.has_tomorrow_schedule,
    }


def intervals_to_payload(intervals: list[Interval]) -> list[dict[str, str]]:
    return [
        {"start": interval.start.isoformat(), "end": interval.end.isoformat()}
        for interval in intervals
    ]


def optional_isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
