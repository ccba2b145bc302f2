"""Countdown value types."""

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    """Which screen the page shows."""

    INVITATION = "invitation"
    PROPOSAL = "proposal"


@dataclass(frozen=True)
class TimeParts:
    """Remaining time split into display components."""

    days: int
    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class CountdownSnapshot:
    """Value published to observers on every tick."""

    remaining_ms: int
    parts: TimeParts
    phase: Phase

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "remaining_ms": self.remaining_ms,
            "days": self.parts.days,
            "hours": self.parts.hours,
            "minutes": self.parts.minutes,
            "seconds": self.parts.seconds,
            "phase": self.phase.value,
        }
