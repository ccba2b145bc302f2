"""Rich console for the countdown and config views."""

from rich.console import Console

# Countdown digits and config values print as given, without repr highlighting
console = Console(highlight=False)
