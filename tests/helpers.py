from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

KYIV = ZoneInfo("Europe/Kyiv")
SCHEDULE_DAY = datetime(2026, 2, 18, tzinfo=KYIV)


def at(clock: str, days: int = 0, base: datetime = SCHEDULE_DAY) -> datetime:
    hours, minutes = (int(part) for part in clock.split(":"))
    return base + timedelta(days=days, hours=hours, minutes=minutes)


def group_text(outages: str, group: str = "1.2") -> str:
    return f"Група {group}. Електроенергії немає {outages}."


def schedule_markup(*paragraphs: str, as_of: str | None = "10:15 18.02.2026") -> str:
    body = []
    if as_of is not None:
        body.append(f"<p>Інформація станом на {as_of}</p>")
    body.extend(f"<p>{paragraph}</p>" for paragraph in paragraphs)
    return "<div class=\"schedule\">" + "".join(body) + "</div>"
