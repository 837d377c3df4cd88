"""Demonstrate sunrise/sunset and day progress for New York City on the June solstice."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from elapsing._types import Coordinate
from elapsing.formatting import format_clock, format_daylight
from elapsing.snapshot import day_snapshot
from elapsing.solar import day_of_year, solar_events, sun_times, utc_offset_hours


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    nyc = Coordinate(latitude=40.7128, longitude=-74.0060)
    dt = datetime(2024, 6, 21, 14, 30, tzinfo=ZoneInfo("America/New_York"))
    offset = utc_offset_hours(dt)

    result = solar_events(dt.year, dt.month, dt.day, nyc.latitude, nyc.longitude, offset)
    times = sun_times(dt, nyc)
    snap = day_snapshot(dt, nyc)

    print("=== Sunrise/Sunset Calculation Example ===")
    print(f"Location: New York City ({nyc.latitude:.4f}°N, {-nyc.longitude:.4f}°W)")
    print(f"Date/Time: {dt}")
    print(f"Day of year (approx.): {day_of_year(dt.year, dt.month, dt.day)}")
    print(f"UTC offset used: {offset:+d} h")
    print()
    print("--- Sun Events ---")
    print(f"Sunrise: {format_clock(result.sunrise_offset_hours)} ({result.sunrise_offset_hours:.4f} h)")
    print(f"Sunset: {format_clock(result.sunset_offset_hours)} ({result.sunset_offset_hours:.4f} h)")
    print(f"Daylight: {format_daylight(result.daylight_hours)}")
    print(f"Sunrise instant: {times.sunrise.isoformat()}")
    print(f"Sunset instant: {times.sunset.isoformat()}")
    print()
    print("--- Display ---")
    print(f"{snap.title}: {snap.clock_text}")
    print(snap.percent_text)

    print()
    print("--- Polar Night ---")
    print(solar_events(2024, 12, 21, 75.0, 15.0, 1))


if __name__ == "__main__":
    main()
