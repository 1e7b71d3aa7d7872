from __future__ import annotations

import hashlib

from loe_status.core.constants import (
    FINGERPRINT_ALL_DAY,
    FINGERPRINT_LINE,
    FINGERPRINT_NOT_FOUND,
    FINGERPRINT_TOMORROW,
    FINGERPRINT_UNAVAILABLE,
)
from loe_status.core.groups import format_group_emoji
from loe_status.parsers.intervals import has_all_day_marker, outage_labels


def _outage_lines(text: str) -> list[str]:
    return [FINGERPRINT_LINE.format(label=label) for label in outage_labels(text)]


def fingerprint(today_text: str | None, tomorrow_text: str | None, group_label: str) -> str:
    """Build the canonical schedule content used for change detection.

    Only the outage windows, the all-day marker and the group take part, so a
    page re-published with a new "as of" time keeps the same fingerprint.
    """
    if today_text is None:
        return FINGERPRINT_NOT_FOUND.format(group=group_label)

    lines = _outage_lines(today_text)
    if not lines:
        if has_all_day_marker(today_text):
            lines = [FINGERPRINT_ALL_DAY]
        else:
            lines = [FINGERPRINT_UNAVAILABLE.format(group=group_label)]

    if tomorrow_text:
        tomorrow_lines = _outage_lines(tomorrow_text)
        if tomorrow_lines:
            lines += ["", FINGERPRINT_TOMORROW, *tomorrow_lines]
        elif has_all_day_marker(tomorrow_text):
            lines += ["", f"{FINGERPRINT_TOMORROW} {FINGERPRINT_ALL_DAY}"]

    lines += ["", format_group_emoji(group_label)]
    return "\n".join(lines)


def fingerprint_digest(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()
