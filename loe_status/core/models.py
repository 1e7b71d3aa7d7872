from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class PowerState(str, Enum):
    ON = "on"
    OFF = "off"


@dataclass(frozen=True)
class Interval:
    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end


@dataclass(frozen=True)
class ScheduleText:
    group_label: str
    raw_text: str


@dataclass(frozen=True)
class ElectricityStatus:
    is_on: bool
    minutes_until_change: int | None
    is_tomorrow: bool
    tomorrow_first_outage_label: str | None
    has_tomorrow_schedule: bool

    @property
    def state(self) -> PowerState:
        return PowerState.ON if self.is_on else PowerState.OFF
