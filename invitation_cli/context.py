"""Shared CLI context with lazy-initialized dependencies."""

from invitation.config import InvitationConfig
from invitation.countdown import CountdownClock


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        snapshot = ctx.clock.tick()
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        self._config: InvitationConfig | None = None
        self._clock: CountdownClock | None = None

    @property
    def config(self) -> InvitationConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = InvitationConfig.from_env()
        return self._config

    @property
    def clock(self) -> CountdownClock:
        """Get countdown clock for the configured event (lazy-loaded)."""
        if self._clock is None:
            self._clock = CountdownClock(
                self.config.target_ms, initial_phase=self.config.initial_phase
            )
        return self._clock


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
