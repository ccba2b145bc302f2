"""Pure formatting functions for display output."""

from datetime import datetime

from invitation.models.countdown import TimeParts


def format_time_parts(parts: TimeParts) -> str:
    """Format remaining time compactly.

    Args:
        parts: Decomposed remaining time.

    Returns:
        Formatted string (e.g., "3d 04:05:06", "00:01:30").
    """
    clock = f"{parts.hours:02d}:{parts.minutes:02d}:{parts.seconds:02d}"
    if parts.days:
        return f"{parts.days}d {clock}"
    return clock


def format_datetime(dt: datetime, timezone: str | None = None) -> str:
    """Format an event datetime for display.

    Args:
        dt: Datetime to format.
        timezone: Optional zone name appended to the output.

    Returns:
        Formatted string (e.g., "2025-10-24 19:30 America/Mexico_City").
    """
    formatted = dt.strftime("%Y-%m-%d %H:%M")
    if timezone:
        return f"{formatted} {timezone}"
    return formatted
