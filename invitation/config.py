"""Configuration for the invitation page."""

import os
from datetime import datetime
from pathlib import Path
from typing import Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from invitation.constants import DEFAULT_SECRET_KEY, DEFAULT_TIMEZONE
from invitation.exceptions import ConfigError
from invitation.models.countdown import Phase
from invitation.models.event import CalendarEvent, ensure_timezone

Variant = Literal["invitation", "proposal"]

# Per-variant defaults; explicit environment values override them
VARIANTS: dict[str, dict] = {
    "invitation": {
        "initial_phase": Phase.INVITATION,
        "autoplay": False,
        "celebration": False,
    },
    "proposal": {
        "initial_phase": Phase.PROPOSAL,
        "autoplay": True,
        "celebration": True,
    },
}

# Environment variable -> config field, for plain string/typed fields
ENV_FIELDS = {
    "INVITATION_INITIAL_PHASE": "initial_phase",
    "INVITATION_AUTOPLAY": "autoplay",
    "INVITATION_CELEBRATION": "celebration",
    "INVITATION_BASE_URL": "base_url",
    "INVITATION_TIMEZONE": "timezone",
    "INVITATION_EVENT_TITLE": "event_title",
    "INVITATION_EVENT_START": "event_start",
    "INVITATION_EVENT_END": "event_end",
    "INVITATION_EVENT_DESCRIPTION": "event_description",
    "INVITATION_EVENT_LOCATION": "event_location",
    "INVITATION_RECIPIENT": "recipient",
    "INVITATION_SECRET_KEY": "secret_key",
    "INVITATION_HOST": "host",
    "LOG_FILENAME": "log_filename",
}


class InvitationConfig(BaseModel):
    """Invitation configuration with Pydantic validation."""

    # Deployment variant
    variant: Variant = Field(default="proposal")
    initial_phase: Phase = Field(default=Phase.PROPOSAL)
    autoplay: bool = Field(default=True)
    celebration: bool = Field(default=True)

    # Static assets
    base_url: str = Field(default="/static/")

    # Event
    timezone: str = Field(default=DEFAULT_TIMEZONE)
    event_title: str = Field(default="Concierto de Sebastian Romero")
    event_start: datetime = Field(default=datetime(2025, 10, 24, 19, 30))
    event_end: datetime = Field(default=datetime(2025, 10, 24, 21, 30))
    event_description: Optional[str] = Field(
        default="Invitación especial para Diana Laura Contreras 💕"
    )
    event_location: Optional[str] = Field(
        default=(
            "FORO LA PAZ, Av. de la Paz 57, 1er piso, San Ángel, "
            "Álvaro Obregón, 01000, CDMX"
        )
    )
    recipient: str = Field(default="Diana Laura Contreras")

    # Web server
    secret_key: str = Field(default=DEFAULT_SECRET_KEY)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000, ge=1, le=65535)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="invitation.log")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        return ensure_timezone(v)

    @classmethod
    def for_variant(cls, variant: Variant, **overrides) -> "InvitationConfig":
        """Build a config with the defaults of a deployment variant."""
        if variant not in VARIANTS:
            raise ConfigError(
                f"Unknown variant '{variant}'. Choose one of: {', '.join(VARIANTS)}"
            )
        values = {"variant": variant, **VARIANTS[variant], **overrides}
        return cls(**values)

    @classmethod
    def from_env(cls) -> "InvitationConfig":
        """Load configuration from environment variables and .env file.

        Raises:
            ConfigError: If a variable holds a value the model rejects
        """
        load_dotenv(find_dotenv(usecwd=True))

        variant = os.environ.get("INVITATION_VARIANT", "proposal")

        config_dict = {}
        for env_key, field_name in ENV_FIELDS.items():
            if env_key in os.environ:
                config_dict[field_name] = os.environ[env_key]

        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        if "INVITATION_PORT" in os.environ:
            try:
                config_dict["port"] = int(os.environ["INVITATION_PORT"])
            except ValueError:
                pass  # Keep default if invalid

        try:
            return cls.for_variant(variant, **config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @property
    def target_ms(self) -> float:
        """Event end as epoch milliseconds."""
        return self.calendar_event().end_utc.timestamp() * 1000

    def calendar_event(self) -> CalendarEvent:
        """The configured event as a CalendarEvent."""
        return CalendarEvent(
            title=self.event_title,
            start=self.event_start,
            end=self.event_end,
            description=self.event_description,
            location=self.event_location,
            timezone=self.timezone,
        )
