"""Google Calendar "add event" link generation."""

from datetime import datetime
from urllib.parse import urlencode
from zoneinfo import ZoneInfo

from invitation.constants import (
    DEFAULT_TIMEZONE,
    GOOGLE_CALENDAR_URL,
    UTC_TIMESTAMP_FORMAT,
)
from invitation.models.event import CalendarEvent, UTC


def format_utc_timestamp(dt: datetime, timezone: str = DEFAULT_TIMEZONE) -> str:
    """
    Render an instant as YYYYMMDDTHHMMSSZ in UTC.

    Args:
        dt: Instant to render; naive values are read as wall-clock time in
            ``timezone``
        timezone: IANA zone used for naive values

    Returns:
        Compact UTC timestamp with a trailing Z and no fractional seconds
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo(timezone))
    return dt.astimezone(UTC).strftime(UTC_TIMESTAMP_FORMAT)


def build_calendar_url(event: CalendarEvent) -> str:
    """
    Build the Google Calendar event-creation URL for an event.

    The same event always yields the same URL. The start/end order is not
    checked.

    Example:
        >>> url = build_calendar_url(
        ...     CalendarEvent(
        ...         title="Cena",
        ...         start=datetime(2025, 10, 24, 19, 30),
        ...         end=datetime(2025, 10, 24, 21, 30),
        ...     )
        ... )
        >>> "action=TEMPLATE" in url
        True
    """
    start = format_utc_timestamp(event.start, event.timezone)
    end = format_utc_timestamp(event.end, event.timezone)

    params = {
        "action": "TEMPLATE",
        "text": event.title,
        "dates": f"{start}/{end}",
        "ctz": event.timezone,
    }
    if event.description:
        params["details"] = event.description
    if event.location:
        params["location"] = event.location

    return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"
