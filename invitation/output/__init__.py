"""Output layer for calendar files."""

from invitation.output.ics_writer import ICSWriter

__all__ = [
    "ICSWriter",
]
