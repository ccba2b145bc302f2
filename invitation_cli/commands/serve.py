"""Run the invitation page web server."""

import logging

import typer
from typing_extensions import Annotated

from invitation import create_app
from invitation_cli.context import get_context

logger = logging.getLogger(__name__)


def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Interface to bind (default from config)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (default from config)"),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable the Flask debugger and reloader"),
    ] = False,
) -> None:
    """Serve the invitation page."""
    ctx = get_context()
    config = ctx.config

    app = create_app(config)
    bind_host = host or config.host
    bind_port = port or config.port

    logger.info(
        f"Serving {config.variant} variant on http://{bind_host}:{bind_port}"
    )
    app.run(host=bind_host, port=bind_port, debug=debug)
