from __future__ import annotations

from datetime import datetime, timedelta

from loe_status.core.constants import ALL_DAY_MARKER, END_OF_DAY, INTERVAL_RE
from loe_status.core.models import Interval


def _clock_offset(clock: str) -> timedelta:
    hours, minutes = clock.split(":")
    return timedelta(hours=int(hours), minutes=int(minutes))


def parse_intervals(text: str | None, reference_day_start: datetime) -> list[Interval]:
    """Extract outage windows from a schedule paragraph.

    ``reference_day_start`` is the midnight of the day the paragraph describes.
    An end of "24:00" is the next midnight; an end earlier than its start
    belongs to the following day.
    """
    if not text:
        return []

    intervals: list[Interval] = []
    for match in INTERVAL_RE.finditer(text):
        start_clock, end_clock = match.groups()
        start = reference_day_start + _clock_offset(start_clock)
        if end_clock == END_OF_DAY:
            end = reference_day_start + timedelta(days=1)
        else:
            end = reference_day_start + _clock_offset(end_clock)

        if end < start:
            end += timedelta(days=1)

        intervals.append(Interval(start=start, end=end))

    return sorted(intervals, key=lambda interval: interval.start)


def first_outage_label(text: str | None) -> str | None:
    if not text:
        return None
    match = INTERVAL_RE.search(text)
    return match.group(1) if match else None


def outage_labels(text: str | None) -> list[str]:
    if not text:
        return []
    return [f"{start} до {end}" for start, end in INTERVAL_RE.findall(text)]


def has_all_day_marker(text: str | None) -> bool:
    return bool(text) and ALL_DAY_MARKER in text


def total_outage_hours(intervals: list[Interval]) -> float:
    total = timedelta()
    for interval in intervals:
        total += interval.end.replace(tzinfo=None) - interval.start.replace(tzinfo=None)
    return total.total_seconds() / 3600
