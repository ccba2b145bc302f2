"""Tests for Pydantic models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from invitation.models import ButtonState, CalendarEvent, EvasionProfile, Phase, PlaybackState
from invitation.models.event import ensure_timezone


def test_calendar_event_creation():
    """Test basic event creation."""
    event = CalendarEvent(
        title="Cena",
        start=datetime(2025, 10, 24, 19, 30),
        end=datetime(2025, 10, 24, 21, 30),
    )
    assert event.title == "Cena"
    assert event.description is None
    assert event.location is None


def test_calendar_event_iso_strings():
    event = CalendarEvent(
        title="Cena", start="2025-10-24T19:30:00", end="2025-10-24T21:30:00"
    )
    assert event.start == datetime(2025, 10, 24, 19, 30)


def test_calendar_event_utc_conversion():
    event = CalendarEvent(
        title="Cena",
        start=datetime(2025, 10, 24, 19, 30),
        end=datetime(2025, 10, 24, 21, 30, tzinfo=timezone.utc),
    )
    assert event.start_utc == datetime(2025, 10, 25, 1, 30, tzinfo=timezone.utc)
    # Aware values keep their own offset
    assert event.end_utc == datetime(2025, 10, 24, 21, 30, tzinfo=timezone.utc)


def test_button_state_defaults():
    state = ButtonState()
    assert state.no_clicks == 0
    assert state.no_scale == 1.0
    assert state.yes_scale == 1.0
    assert (state.offset_x, state.offset_y) == (0.0, 0.0)


def test_button_state_rejects_negative_clicks():
    with pytest.raises(ValidationError):
        ButtonState(no_clicks=-1)


def test_evasion_profile_requires_positive_bounds():
    with pytest.raises(ValidationError):
        EvasionProfile(
            no_shrink=0.1,
            no_min_scale=0.3,
            yes_grow=0.1,
            yes_max_scale=1.5,
            max_offset_x=0,
            max_offset_y=50,
        )


def test_playback_state_defaults():
    assert PlaybackState() == PlaybackState(is_playing=False, last_error=None)


def test_phase_values():
    assert Phase("invitation") is Phase.INVITATION
    assert Phase("proposal") is Phase.PROPOSAL


def test_ensure_timezone():
    assert ensure_timezone("Europe/Madrid") == "Europe/Madrid"
    with pytest.raises(ValueError, match="Unknown timezone"):
        ensure_timezone("Nowhere/Special")
