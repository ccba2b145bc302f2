"""Exception hierarchy for invitation operations."""


class InvitationError(Exception):
    """Base exception for invitation operations."""

    pass


class ConfigError(InvitationError):
    """Invalid configuration value."""

    pass


class ExportError(InvitationError):
    """Error during calendar export."""

    pass
