"""Elapsed and remaining time within the current local day.

Day boundaries are local midnights in the tzinfo of the supplied datetime,
so days that gain or lose an hour to daylight saving are measured in real
elapsed time.
"""

from datetime import datetime as DateTime, time, timedelta, timezone

from ._types import ClockReading, DayProgress

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def _require_aware(now: DateTime) -> None:
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("now must be timezone-aware")


def start_of_day(now: DateTime) -> DateTime:
    """Local midnight at the start of now's calendar day."""
    _require_aware(now)
    return DateTime.combine(now.date(), time(), tzinfo=now.tzinfo)


def end_of_day(now: DateTime) -> DateTime:
    """Local midnight at the start of the following calendar day."""
    _require_aware(now)
    tomorrow = now.date() + timedelta(days=1)
    return DateTime.combine(tomorrow, time(), tzinfo=now.tzinfo)


def _seconds_between(earlier: DateTime, later: DateTime) -> float:
    # Same-tzinfo subtraction ignores offsets, so compare in UTC.
    return (later.astimezone(timezone.utc) - earlier.astimezone(timezone.utc)).total_seconds()


def split_seconds(total_seconds: float) -> ClockReading:
    """Split a duration into whole hours, minutes and seconds."""
    whole = int(total_seconds)
    hours, rest = divmod(whole, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    return ClockReading(hours=hours, minutes=minutes, seconds=seconds)


def time_elapsed(now: DateTime) -> ClockReading:
    """Time since local midnight."""
    return split_seconds(_seconds_between(start_of_day(now), now))


def time_remaining(now: DateTime) -> ClockReading:
    """Time until the next local midnight."""
    return split_seconds(_seconds_between(now, end_of_day(now)))


def progress_through_day(now: DateTime) -> float:
    """Fraction of the local day already elapsed, in [0, 1)."""
    start = start_of_day(now)
    total = _seconds_between(start, end_of_day(now))
    return _seconds_between(start, now) / total


def day_progress(now: DateTime) -> DayProgress:
    """Elapsed, remaining and fraction of the local day in one value."""
    return DayProgress(
        elapsed=time_elapsed(now),
        remaining=time_remaining(now),
        fraction=progress_through_day(now),
    )
