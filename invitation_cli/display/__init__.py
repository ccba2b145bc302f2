"""Display module for terminal output.

- console: Shared Rich console instance
- CountdownRenderer: countdown/proposal panel
- Formatting functions for remaining time and dates
"""

from invitation_cli.display.console import console
from invitation_cli.display.countdown_renderer import CountdownRenderer
from invitation_cli.display.formatters import format_datetime, format_time_parts

__all__ = [
    "console",
    "CountdownRenderer",
    "format_datetime",
    "format_time_parts",
]
