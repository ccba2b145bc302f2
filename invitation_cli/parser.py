"""Typer application and command registration."""

import logging

import typer
from typing_extensions import Annotated

from invitation.exceptions import InvitationError
from invitation_cli import setup_logging
from invitation_cli.commands import config, countdown, link, serve
from invitation_cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Romantic invitation page: countdown, calendar export and web server.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Set up logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    try:
        setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    except InvitationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    set_context(ctx)


app.command("countdown")(countdown)
app.command("link")(link)
app.command("serve")(serve)
app.command("config")(config)
