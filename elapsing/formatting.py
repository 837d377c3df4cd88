"""Text renderings of clock values, sun events and day progress."""

from ._types import ClockReading

PLACEHOLDER = "--:--"


def hours_to_clock(hours: float) -> tuple[int, int]:
    """Convert fractional hours since midnight to (hour, minute), truncating seconds."""
    total_minutes = int(hours * 60.0)
    return (total_minutes // 60, total_minutes % 60)


def format_clock(hours: float) -> str:
    """Format hours since midnight as 24-hour HH:MM."""
    hour, minute = hours_to_clock(hours)
    return f"{hour:02d}:{minute:02d}"


def format_event(hours: float | None, placeholder: str = PLACEHOLDER) -> str:
    """Format a sun event time, or the placeholder when there is none."""
    if hours is None:
        return placeholder
    return format_clock(hours)


def format_daylight(hours: float | None, placeholder: str = PLACEHOLDER) -> str:
    """Format a daylight length as e.g. '13h 6m'."""
    if hours is None:
        return placeholder
    hour, minute = hours_to_clock(hours)
    return f"{hour}h {minute}m"


def format_percent(fraction: float) -> str:
    """Format a day fraction as a truncated whole percentage."""
    return f"{int(fraction * 100)}% of day complete"


def format_reading(reading: ClockReading, show_seconds: bool = True) -> str:
    """Format a clock reading as HH:MM:SS, or HH:MM without seconds."""
    text = f"{reading.hours:02d}:{reading.minutes:02d}"
    if show_seconds:
        text += f":{reading.seconds:02d}"
    return text
