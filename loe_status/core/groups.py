from __future__ import annotations

from loe_status.core.constants import KEYCAP_DIGITS


def parse_group_from_api(raw: str | int | None) -> str | None:
    """Normalize a group label: "12" and 12 become "1.2", "1.2" stays as is.

    Single digits, zero and empty values are not valid group labels.
    """
    if not raw:
        return None

    value = str(raw).strip()
    if "." in value:
        return value
    if len(value) >= 2:
        return f"{value[0]}.{value[1]}"
    return None


def format_group_emoji(group: str) -> str:
    return ".".join(
        "".join(KEYCAP_DIGITS.get(char, char) for char in part) for part in group.split(".")
    )
