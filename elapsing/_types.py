"""Frozen dataclasses for all structured return types."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum


class Absence(StrEnum):
    NEVER_RISES = "never_rises"
    NEVER_SETS = "never_sets"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class SolarResult:
    """Local clock times as hours since local midnight, each in [0, 24)."""

    sunrise_offset_hours: float
    sunset_offset_hours: float

    @property
    def daylight_hours(self) -> float:
        return (self.sunset_offset_hours - self.sunrise_offset_hours) % 24.0


@dataclass(frozen=True)
class NoSunEvent:
    reason: Absence


@dataclass(frozen=True)
class SunTimes:
    sunrise: datetime
    sunset: datetime

    @property
    def daylight(self) -> timedelta:
        return (self.sunset - self.sunrise) % timedelta(days=1)


@dataclass(frozen=True)
class ClockReading:
    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class DayProgress:
    elapsed: ClockReading
    remaining: ClockReading
    fraction: float


@dataclass(frozen=True)
class DisplayConfig:
    show_sunrise_sunset: bool = True
    show_percent_complete: bool = True
    show_seconds: bool = True
    show_time_elapsed: bool = False
    placeholder: str = "--:--"


@dataclass(frozen=True)
class DaySnapshot:
    title: str
    reading: ClockReading
    clock_text: str
    progress: float | None
    percent_text: str | None
    sunrise_text: str | None
    sunset_text: str | None
    daylight_text: str | None
    solar: SolarResult | NoSunEvent | None
