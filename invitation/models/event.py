"""Calendar event model with Pydantic v2 validation."""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator

from invitation.constants import DEFAULT_TIMEZONE

UTC = timezone.utc


def ensure_timezone(name: str) -> str:
    """Return the identifier if it names an IANA zone.

    Raises:
        ValueError: If the zone is unknown
    """
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name}") from e
    return name


class CalendarEvent(BaseModel):
    """Event to export as a calendar link or ICS file.

    Naive ``start``/``end`` values are wall-clock times in ``timezone``;
    aware values are used as given. ``end`` is expected to be after
    ``start`` but this is left to the caller.
    """

    title: str
    start: datetime
    end: datetime
    description: Optional[str] = None
    location: Optional[str] = None
    timezone: str = DEFAULT_TIMEZONE

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject identifiers that are not IANA zones."""
        return ensure_timezone(v)

    def localize(self, dt: datetime) -> datetime:
        """Attach the event timezone to a naive datetime."""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=ZoneInfo(self.timezone))
        return dt

    @property
    def start_utc(self) -> datetime:
        return self.localize(self.start).astimezone(UTC)

    @property
    def end_utc(self) -> datetime:
        return self.localize(self.end).astimezone(UTC)

    class Config:
        """Pydantic config."""

        frozen = True
