"""CLI package for the invitation page."""

import logging
import sys

from invitation.config import InvitationConfig

# The page polls /api/countdown every second; each poll is a request line
REQUEST_LOGGERS = ("werkzeug",)


class StderrHandler(logging.StreamHandler):
    """Stream handler that writes to the current ``sys.stderr``.

    ``rich.live.Live`` swaps ``sys.stderr`` while the countdown is on
    screen and prints captured output above the live view. A handler bound
    to the original stream would draw over it instead.
    """

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: InvitationConfig | None = None
) -> None:
    """Send log records to the log file and to stderr.

    The file gets every record, tagged with its logger so ticker, web and
    export messages can be told apart. The console shows warnings, or info
    with ``verbose``, or errors only with ``quiet``. Per-request lines from
    the development server are kept only in verbose mode.

    Args:
        verbose: Show info messages and request lines
        quiet: Show errors only
        config: Optional InvitationConfig for log directory/filename settings
    """
    if config is None:
        config = InvitationConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = StderrHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    if quiet:
        console_handler.setLevel(logging.ERROR)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in REQUEST_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if verbose else logging.WARNING)


def main() -> None:
    """Main entry point for the CLI."""
    from invitation_cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
