"""Display configuration file path and settings."""

import os
from pathlib import Path

from rich.table import Table

from invitation.config import ENV_FIELDS, InvitationConfig
from invitation_cli.context import get_context
from invitation_cli.display import console

# Config field -> environment variable, for source detection
FIELD_ENV = {field_name: env_key for env_key, field_name in ENV_FIELDS.items()}
FIELD_ENV.update(
    {
        "variant": "INVITATION_VARIANT",
        "port": "INVITATION_PORT",
        "log_dir": "LOG_DIR",
    }
)


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()

    return None


def _get_source(field_name: str, variant_defaults: InvitationConfig) -> str:
    """Determine where a config value came from."""
    env_key = FIELD_ENV.get(field_name)
    if env_key and env_key in os.environ:
        return "env"
    base_defaults = InvitationConfig()
    if getattr(variant_defaults, field_name) != getattr(base_defaults, field_name):
        return "variant"
    return "default"


def config() -> None:
    """Display configuration file path and settings."""
    env_file = _find_env_file()
    cfg = get_context().config
    variant_defaults = InvitationConfig.for_variant(cfg.variant)

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", no_wrap=True)
    table.add_column("SOURCE", style="dim", no_wrap=True)
    table.add_column("VALUE")

    for field_name, value in cfg.model_dump(mode="json").items():
        if field_name == "secret_key":
            value = "********"
        elif value is None:
            value = "[dim]None[/dim]"
        table.add_row(field_name, _get_source(field_name, variant_defaults), str(value))

    console.print()
    if env_file:
        console.print(f"[bold].env file:[/bold] {env_file}")
    else:
        console.print("[bold].env file:[/bold] [dim]not found[/dim]")
    console.print()
    console.print(table)
    console.print()
