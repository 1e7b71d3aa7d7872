from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from bs4 import BeautifulSoup, ParserRejectedMarkup

from loe_status.core.constants import DEFAULT_TIMEZONE, GROUP_PREFIX, INFO_PREFIX, INFO_TIMESTAMP_RE
from loe_status.core.models import ScheduleText

_logger = logging.getLogger("loe.markup")


def _paragraphs(markup: str | None) -> list[str]:
    if not markup:
        return []

    try:
        soup = BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup:
        _logger.warning("Rejected schedule markup (%d chars)", len(markup))
        return []

    return [paragraph.get_text().strip() for paragraph in soup.find_all("p")]


def _first_with_prefix(markup: str | None, prefix: str) -> str | None:
    for text in _paragraphs(markup):
        if text.startswith(prefix):
            return text
    return None


def extract_group_text(markup: str | None, group: str) -> str | None:
    """Return the first paragraph describing ``group``, or None when absent."""
    text = _first_with_prefix(markup, GROUP_PREFIX.format(group=group))
    if text is None and markup:
        _logger.debug("No schedule paragraph for group %s", group)
    return text


def extract_schedule_text(markup: str | None, group: str) -> ScheduleText | None:
    text = extract_group_text(markup, group)
    if text is None:
        return None
    return ScheduleText(group_label=group, raw_text=text)


def extract_info_text(markup: str | None) -> str | None:
    return _first_with_prefix(markup, INFO_PREFIX)


def parse_info_timestamp(
    info_text: str | None,
    timezone_name: str = DEFAULT_TIMEZONE,
) -> datetime | None:
    """Read the "as of HH:MM DD.MM.YYYY" stamp of a schedule page.

    The stamp is display metadata only; it never takes part in change detection.
    """
    if not info_text:
        return None

    match = INFO_TIMESTAMP_RE.search(info_text)
    if match is None:
        return None

    clock, day = match.groups()
    try:
        parsed = datetime.strptime(f"{day} {clock}", "%d.%m.%Y %H:%M")
    except ValueError:
        return None
    return parsed.replace(tzinfo=ZoneInfo(timezone_name))
