"""Countdown renderer for the terminal."""

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from invitation.config import InvitationConfig
from invitation.models.countdown import CountdownSnapshot, Phase
from invitation_cli.display.formatters import format_datetime, format_time_parts


class CountdownRenderer:
    """Render countdown snapshots as a Rich panel.

    The invitation screen shows event details and the four counters; the
    proposal screen shows the question instead.
    """

    def __init__(self, config: InvitationConfig):
        self.config = config

    def render(self, snapshot: CountdownSnapshot) -> Panel:
        """Build the panel for one snapshot.

        Args:
            snapshot: Values published by the clock.

        Returns:
            Rich renderable.
        """
        if snapshot.phase is Phase.PROPOSAL and snapshot.remaining_ms == 0:
            return self._render_proposal()
        return self._render_countdown(snapshot)

    def _render_countdown(self, snapshot: CountdownSnapshot) -> Panel:
        details = Table(show_header=False, box=None, padding=(0, 2))
        details.add_column("Label", style="dim", width=12)
        details.add_column("Value")
        details.add_row("Evento", self.config.event_title)
        details.add_row(
            "Fecha",
            format_datetime(self.config.event_start, self.config.timezone),
        )
        if self.config.event_location:
            details.add_row("Lugar", self.config.event_location)

        timer = Table(show_header=True, header_style="bold yellow", expand=True)
        for label in ("Días", "Horas", "Minutos", "Segundos"):
            timer.add_column(label, justify="center")
        parts = snapshot.parts
        timer.add_row(
            str(parts.days), str(parts.hours), str(parts.minutes), str(parts.seconds)
        )

        return Panel(
            Group(details, Text(""), timer),
            title=f"💕 Invitación para {self.config.recipient} 💕",
            subtitle=format_time_parts(parts),
            border_style="yellow",
        )

    def _render_proposal(self) -> Panel:
        return Panel(
            Text("¿Puedo ser tu novio? 💖", justify="center", style="bold"),
            title="💕 ¡Momento Especial! 💕",
            border_style="yellow",
        )
