"""Everything a day-progress display needs for one refresh.

Display settings arrive as a DisplayConfig and stay out of the solar
calculation, which only ever sees a date, a coordinate and an offset.
"""

import logging
from datetime import datetime as DateTime

from . import day_clock, formatting, solar
from ._types import Coordinate, DaySnapshot, DisplayConfig, NoSunEvent, SolarResult

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = DisplayConfig()

ELAPSED_TITLE = "Time Elapsed Today"
REMAINING_TITLE = "Time Remaining Today"


def _solar_for(now: DateTime, coordinate: Coordinate | None) -> SolarResult | NoSunEvent | None:
    if coordinate is None:
        logger.debug("No coordinate available, sun events left blank")
        return None
    return solar.solar_events_cached(
        now.year,
        now.month,
        now.day,
        coordinate.latitude,
        coordinate.longitude,
        solar.utc_offset_hours(now),
    )


def day_snapshot(
    now: DateTime,
    coordinate: Coordinate | None = None,
    config: DisplayConfig = DEFAULT_CONFIG,
) -> DaySnapshot:
    """Build the display values for a timezone-aware instant."""
    progress = day_clock.day_progress(now)
    reading = progress.elapsed if config.show_time_elapsed else progress.remaining
    title = ELAPSED_TITLE if config.show_time_elapsed else REMAINING_TITLE

    fraction = percent_text = None
    if config.show_percent_complete:
        fraction = progress.fraction
        percent_text = formatting.format_percent(fraction)

    result = _solar_for(now, coordinate)
    sunrise_text = sunset_text = daylight_text = None
    if config.show_sunrise_sunset:
        if isinstance(result, SolarResult):
            sunrise_text = formatting.format_event(result.sunrise_offset_hours)
            sunset_text = formatting.format_event(result.sunset_offset_hours)
            daylight_text = formatting.format_daylight(result.daylight_hours)
        else:
            sunrise_text = sunset_text = daylight_text = config.placeholder

    return DaySnapshot(
        title=title,
        reading=reading,
        clock_text=formatting.format_reading(reading, config.show_seconds),
        progress=fraction,
        percent_text=percent_text,
        sunrise_text=sunrise_text,
        sunset_text=sunset_text,
        daylight_text=daylight_text,
        solar=result,
    )
