"""Pydantic models for the invitation page."""

from invitation.models.countdown import CountdownSnapshot, Phase, TimeParts
from invitation.models.event import CalendarEvent
from invitation.models.playback import PlaybackState
from invitation.models.responses import ButtonState, EvasionProfile

__all__ = [
    "CalendarEvent",
    "CountdownSnapshot",
    "Phase",
    "TimeParts",
    "PlaybackState",
    "ButtonState",
    "EvasionProfile",
]
