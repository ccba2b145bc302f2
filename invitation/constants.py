"""Shared constants for the invitation page."""

# Google Calendar event-creation endpoint
GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"

# Compact UTC timestamp accepted by the calendar provider
UTC_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"

DEFAULT_TIMEZONE = "America/Mexico_City"

# Countdown cadence in seconds
TICK_INTERVAL = 1.0

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000

# Static assets, relative to the base prefix
AUDIO_ASSET = "bonita.mp3"
IMAGE_ASSETS = ("hearts.png", "concert.jpg", "flowers.png")

# Session signing key used when none is configured
DEFAULT_SECRET_KEY = "dev"
