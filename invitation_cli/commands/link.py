"""Print the calendar link for the event, optionally writing an ICS file."""

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from invitation.calendar_link import build_calendar_url
from invitation.exceptions import ExportError
from invitation.output.ics_writer import ICSWriter
from invitation_cli.context import get_context

logger = logging.getLogger(__name__)


def link(
    ics_path: Annotated[
        Path | None,
        typer.Option("--ics", help="Also write the event to this ICS file"),
    ] = None,
) -> None:
    """
    Print the Google Calendar link for the configured event.

    Use --ics to also export the event as an ICS file.
    """
    ctx = get_context()
    event = ctx.config.calendar_event()

    print(build_calendar_url(event))

    if ics_path is None:
        return

    try:
        ICSWriter().write(event, ics_path)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        sys.exit(1)

    print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Exported ICS")
    print(f"  {ics_path.resolve()}")
