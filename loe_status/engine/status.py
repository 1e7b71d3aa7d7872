from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from loe_status.core.constants import DEFAULT_TIMEZONE
from loe_status.core.models import ElectricityStatus, Interval
from loe_status.parsers.intervals import first_outage_label, parse_intervals


def _minutes_between(now: datetime, target: datetime) -> int:
    delta = target.astimezone(timezone.utc) - now.astimezone(timezone.utc)
    return int(delta.total_seconds() / 60)


def _is_midnight_after(instant: datetime, now: datetime) -> bool:
    return instant.time() == time(0) and instant.date() > now.astimezone(instant.tzinfo).date()


def _attach_zone(now: datetime, intervals: list[Interval]) -> datetime:
    if now.tzinfo is not None or not intervals:
        return now
    return now.replace(tzinfo=intervals[0].start.tzinfo)


def _starts_at_midnight(interval: Interval) -> bool:
    return interval.start.time() == time(0)


def evaluate(
    today_intervals: list[Interval],
    tomorrow_intervals: list[Interval],
    now: datetime,
    *,
    tomorrow_text: str | None = None,
) -> ElectricityStatus:
    """Compute the power state at ``now`` and the next transition.

    An outage running to midnight continues into tomorrow's first outage when
    that one starts at 00:00; the transition is then reported on tomorrow.
    A naive ``now`` is read as wall time in the zone of the intervals.
    """
    now = _attach_zone(now, today_intervals or tomorrow_intervals)
    is_on = True
    transition: datetime | None = None
    is_tomorrow = False

    for index, interval in enumerate(today_intervals):
        if interval.contains(now):
            is_on = False
            transition = interval.end

            is_last = index == len(today_intervals) - 1
            if is_last and tomorrow_intervals and _is_midnight_after(interval.end, now):
                tomorrow_first = tomorrow_intervals[0]
                if _starts_at_midnight(tomorrow_first):
                    transition = tomorrow_first.end
                    is_tomorrow = True
            break

        if now < interval.start:
            transition = interval.start
            break

    if transition is None and tomorrow_intervals:
        transition = tomorrow_intervals[0].start
        is_tomorrow = True

    return ElectricityStatus(
        is_on=is_on,
        minutes_until_change=_minutes_between(now, transition) if transition is not None else None,
        is_tomorrow=is_tomorrow,
        tomorrow_first_outage_label=first_outage_label(tomorrow_text) if tomorrow_text else None,
        has_tomorrow_schedule=bool(tomorrow_text) and bool(tomorrow_intervals),
    )


def reference_days(
    now: datetime,
    timezone_name: str = DEFAULT_TIMEZONE,
) -> tuple[datetime, datetime, datetime]:
    """Localize ``now`` and return it with today's and tomorrow's midnights.

    A naive ``now`` is read as wall time in ``timezone_name``.
    """
    zone = ZoneInfo(timezone_name)
    if now.tzinfo is None:
        now = now.replace(tzinfo=zone)
    now = now.astimezone(zone)

    today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return now, today_start, today_start + timedelta(days=1)


def schedule_intervals(
    today_text: str | None,
    tomorrow_text: str | None,
    now: datetime,
    timezone_name: str = DEFAULT_TIMEZONE,
) -> tuple[datetime, list[Interval], list[Interval]]:
    now, today_start, tomorrow_start = reference_days(now, timezone_name)
    return (
        now,
        parse_intervals(today_text, today_start),
        parse_intervals(tomorrow_text, tomorrow_start),
    )


def get_electricity_status(
    today_text: str,
    tomorrow_text: str | None,
    now: datetime,
    timezone_name: str = DEFAULT_TIMEZONE,
) -> ElectricityStatus:
    now, today_intervals, tomorrow_intervals = schedule_intervals(
        today_text, tomorrow_text, now, timezone_name
    )
    return evaluate(today_intervals, tomorrow_intervals, now, tomorrow_text=tomorrow_text)
