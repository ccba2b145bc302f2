"""ICS file writer for the invitation event."""

import hashlib
import logging
from datetime import datetime
from pathlib import Path

from icalendar import Calendar, Event

from invitation.exceptions import ExportError
from invitation.models.event import UTC, CalendarEvent

logger = logging.getLogger(__name__)


class ICSWriter:
    """Writer for single-event ICS calendar files."""

    def to_ical(self, event_model: CalendarEvent) -> bytes:
        """Render the event as iCalendar bytes."""
        cal = Calendar()
        cal.add("prodid", "-//Invitation//EN")
        cal.add("version", "2.0")
        cal.add("X-WR-TIMEZONE", event_model.timezone)

        event = Event()
        event.add("summary", event_model.title)
        event.add("uid", self._uid(event_model))
        event.add("dtstamp", datetime.now(UTC))
        event.add("dtstart", event_model.start_utc)
        event.add("dtend", event_model.end_utc)

        if event_model.description:
            event.add("description", event_model.description)
        if event_model.location:
            event.add("location", event_model.location)

        cal.add_component(event)
        return cal.to_ical()

    def write(self, event_model: CalendarEvent, path: Path) -> None:
        """Write event to ICS file.

        Raises:
            ExportError: If the file cannot be written
        """
        try:
            path.write_bytes(self.to_ical(event_model))
        except OSError as e:
            raise ExportError(f"Could not write {path}: {e}") from e
        logger.info(f"Wrote calendar file {path}")

    @staticmethod
    def _uid(event_model: CalendarEvent) -> str:
        # Same event, same UID
        key = f"{event_model.title}|{event_model.start_utc.isoformat()}"
        return f"{hashlib.sha1(key.encode('utf-8')).hexdigest()}@invitation"
