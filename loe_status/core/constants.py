from __future__ import annotations

import re
from typing import Final

DEFAULT_TIMEZONE: Final[str] = "Europe/Kyiv"

GROUP_PREFIX: Final[str] = "Група {group}."
INFO_PREFIX: Final[str] = "Інформація станом на"
ALL_DAY_MARKER: Final[str] = "Електроенергія є"
END_OF_DAY: Final[str] = "24:00"

_CLOCK = r"(?:[01]\d|2[0-3]):[0-5]\d"

INTERVAL_RE: Final[re.Pattern[str]] = re.compile(rf"з ({_CLOCK}) до ({_CLOCK}|{END_OF_DAY})")
INFO_TIMESTAMP_RE: Final[re.Pattern[str]] = re.compile(
    r"Інформація станом на (\d{2}:\d{2}) (\d{2}\.\d{2}\.\d{4})"
)

FINGERPRINT_LINE: Final[str] = "⏱️ {label}"
FINGERPRINT_ALL_DAY: Final[str] = "✅ Електроенергія є весь день"
FINGERPRINT_UNAVAILABLE: Final[str] = "*{group}*: дані недоступні"
FINGERPRINT_NOT_FOUND: Final[str] = "❌ Дані для Групи {group} не знайдено"
FINGERPRINT_TOMORROW: Final[str] = "📅 Завтра:"

KEYCAP_DIGITS: Final[dict[str, str]] = {str(digit): f"{digit}\ufe0f\u20e3" for digit in range(10)}
