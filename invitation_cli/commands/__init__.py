"""CLI commands package."""

from invitation_cli.commands.config import config
from invitation_cli.commands.countdown import countdown
from invitation_cli.commands.link import link
from invitation_cli.commands.serve import serve

__all__ = [
    "config",
    "countdown",
    "link",
    "serve",
]
