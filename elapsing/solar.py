"""Sunrise and sunset from the Almanac for Computers sunrise equation.

All angles in degrees unless otherwise noted. Results are local clock times
expressed as hours since local midnight.
"""

import functools
import logging
import math
from datetime import datetime as DateTime, timedelta, timezone

from ._types import Absence, CalendarDate, Coordinate, NoSunEvent, SolarResult, SunTimes

logger = logging.getLogger(__name__)

# Official zenith: 90 deg plus refraction and the sun's apparent radius.
ZENITH = 90.833
DEGREES_PER_HOUR = 15.0
RISING_ANCHOR = 6.0
SETTING_ANCHOR = 18.0


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    angle %= 360.0
    # -1e-17 % 360.0 rounds up to 360.0
    return 0.0 if angle == 360.0 else angle


def normalize_hours(hours: float) -> float:
    """Normalize a clock value to 0-24 hour range."""
    hours %= 24.0
    return 0.0 if hours == 24.0 else hours


def day_of_year(year: int, month: int, day: int) -> int:
    """Approximate day of year using the integer leap-year correction.

    Leap years are every fourth year; century rules are not applied.
    """
    n1 = (275 * month) // 9
    n2 = (month + 9) // 12
    n3 = 1 + (year - 4 * (year // 4) + 2) // 3
    return n1 - n2 * n3 + day - 30


def _check_inputs(
    month: int, day: int, latitude: float, longitude: float, timezone_offset_hours: float
) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1-12, got {month}")
    if not 1 <= day <= 31:
        raise ValueError(f"day must be in 1-31, got {day}")
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"latitude must be in [-90, 90], got {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"longitude must be in [-180, 180], got {longitude}")
    if not math.isfinite(timezone_offset_hours):
        raise ValueError(f"timezone_offset_hours must be finite, got {timezone_offset_hours}")


def _event_utc_hours(
    n: int, lng_hour: float, latitude: float, rising: bool
) -> float | Absence:
    """UTC hour of a single rising or setting event.

    Returns the Absence reason when the sun stays below or above the
    zenith threshold all day.
    """
    anchor = RISING_ANCHOR if rising else SETTING_ANCHOR
    t = n + (anchor - lng_hour) / 24.0

    # Sun's mean anomaly and true longitude
    m = 0.9856 * t - 3.289
    m_rad = deg_to_rad(m)
    true_long = normalize_angle(
        m + 1.916 * math.sin(m_rad) + 0.020 * math.sin(2.0 * m_rad) + 282.634
    )

    # Right ascension, put into the same quadrant as the true longitude
    ra = normalize_angle(rad_to_deg(math.atan(0.91764 * math.tan(deg_to_rad(true_long)))))
    ra += math.floor(true_long / 90.0) * 90.0 - math.floor(ra / 90.0) * 90.0
    ra /= DEGREES_PER_HOUR

    sin_dec = 0.39782 * math.sin(deg_to_rad(true_long))
    cos_dec = math.cos(math.asin(sin_dec))

    lat_rad = deg_to_rad(latitude)
    cos_h = (math.cos(deg_to_rad(ZENITH)) - sin_dec * math.sin(lat_rad)) / (
        cos_dec * math.cos(lat_rad)
    )
    if cos_h > 1.0:
        return Absence.NEVER_RISES
    if cos_h < -1.0:
        return Absence.NEVER_SETS

    h = rad_to_deg(math.acos(cos_h))
    if rising:
        h = 360.0 - h
    h /= DEGREES_PER_HOUR

    local_mean_time = h + ra - 0.06571 * t - 6.622
    return normalize_hours(local_mean_time - lng_hour)


def solar_events(
    year: int,
    month: int,
    day: int,
    latitude: float,
    longitude: float,
    timezone_offset_hours: float,
) -> SolarResult | NoSunEvent:
    """Calculate local sunrise and sunset for one calendar day.

    Args:
        year, month, day: Local calendar date
        latitude: Observer's latitude (degrees, negative for South)
        longitude: Observer's longitude (degrees, negative for West)
        timezone_offset_hours: Local UTC offset, truncated to whole hours

    Returns:
        SolarResult with hours since local midnight, or NoSunEvent when
        either event does not occur on that day.
    """
    _check_inputs(month, day, latitude, longitude, timezone_offset_hours)
    offset = math.trunc(timezone_offset_hours)
    n = day_of_year(year, month, day)
    lng_hour = longitude / DEGREES_PER_HOUR

    rise = _event_utc_hours(n, lng_hour, latitude, rising=True)
    if isinstance(rise, Absence):
        logger.debug("No sunrise on %d-%02d-%02d at %.4f: %s", year, month, day, latitude, rise)
        return NoSunEvent(reason=rise)
    set_ = _event_utc_hours(n, lng_hour, latitude, rising=False)
    if isinstance(set_, Absence):
        logger.debug("No sunset on %d-%02d-%02d at %.4f: %s", year, month, day, latitude, set_)
        return NoSunEvent(reason=set_)

    return SolarResult(
        sunrise_offset_hours=normalize_hours(rise + offset),
        sunset_offset_hours=normalize_hours(set_ + offset),
    )


def compute(
    year: int,
    month: int,
    day: int,
    latitude: float,
    longitude: float,
    timezone_offset_hours: float,
) -> SolarResult | None:
    """Sunrise and sunset for the day, or None when either does not occur."""
    match solar_events(year, month, day, latitude, longitude, timezone_offset_hours):
        case SolarResult() as result:
            return result
        case NoSunEvent():
            return None


@functools.lru_cache(maxsize=1024)
def solar_events_cached(
    year: int,
    month: int,
    day: int,
    latitude: float,
    longitude: float,
    timezone_offset_hours: float,
) -> SolarResult | NoSunEvent:
    """Memoized solar_events(); the result only changes once per calendar day."""
    return solar_events(year, month, day, latitude, longitude, timezone_offset_hours)


def compute_cached(
    year: int,
    month: int,
    day: int,
    latitude: float,
    longitude: float,
    timezone_offset_hours: float,
) -> SolarResult | None:
    """Memoized compute(), sharing the solar_events_cached() cache."""
    result = solar_events_cached(year, month, day, latitude, longitude, timezone_offset_hours)
    return result if isinstance(result, SolarResult) else None


def compute_for(
    date: CalendarDate, coordinate: Coordinate, timezone_offset_hours: float
) -> SolarResult | None:
    """compute() over CalendarDate and Coordinate values."""
    return compute(
        date.year,
        date.month,
        date.day,
        coordinate.latitude,
        coordinate.longitude,
        timezone_offset_hours,
    )


def utc_offset_hours(dt: DateTime) -> int:
    """Whole-hour UTC offset of a timezone-aware datetime, truncated toward zero."""
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError("dt must be timezone-aware")
    return math.trunc(offset.total_seconds() / 3600.0)


def sun_times(dt: DateTime, coordinate: Coordinate) -> SunTimes | None:
    """Sunrise and sunset as datetimes on the local day of a timezone-aware datetime."""
    offset = utc_offset_hours(dt)
    result = compute_for(
        CalendarDate(dt.year, dt.month, dt.day), coordinate, offset
    )
    if result is None:
        return None
    midnight = dt.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)
    midnight_utc = midnight.astimezone(timezone.utc)

    def at(hours: float) -> DateTime:
        return (midnight_utc + timedelta(hours=hours)).astimezone(dt.tzinfo)

    return SunTimes(
        sunrise=at(result.sunrise_offset_hours),
        sunset=at(result.sunset_offset_hours),
    )
