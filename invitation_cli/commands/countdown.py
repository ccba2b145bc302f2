"""Live countdown to the end of the event."""

import logging
import threading

import typer
from rich.live import Live
from typing_extensions import Annotated

from invitation.countdown import ClockTicker
from invitation.models.countdown import CountdownSnapshot, Phase
from invitation_cli.context import get_context
from invitation_cli.display import CountdownRenderer, console

logger = logging.getLogger(__name__)


def countdown(
    once: Annotated[
        bool,
        typer.Option("--once", help="Print the current countdown and exit"),
    ] = False,
) -> None:
    """
    Show the countdown to the end of the event.

    Updates every second until the event is over, then shows the proposal.
    Press Ctrl+C to stop early.
    """
    ctx = get_context()
    clock = ctx.clock
    renderer = CountdownRenderer(ctx.config)

    if once:
        console.print(renderer.render(clock.tick()))
        return

    finished = threading.Event()

    with Live(
        renderer.render(clock.snapshot()), console=console, refresh_per_second=4
    ) as live:

        def on_tick(snapshot: CountdownSnapshot) -> None:
            live.update(renderer.render(snapshot))
            if snapshot.phase is Phase.PROPOSAL and snapshot.remaining_ms == 0:
                finished.set()

        unsubscribe = clock.subscribe(on_tick)
        try:
            with ClockTicker(clock):
                while not finished.wait(0.5):
                    pass
        except KeyboardInterrupt:
            logger.info("Countdown interrupted")
        finally:
            unsubscribe()
