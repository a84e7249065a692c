"""CLI: bugsnag-notify config set|show|clear"""

import click
from rich.console import Console
from rich.table import Table

console = Console()

# Keys accepted by `config set`; notify_release_stages is comma-separated
CONFIG_KEYS = (
    "token", "code_version", "context", "release_stage", "notify_release_stages",
    "user_id", "user_name", "user_email",
)


def _load_config() -> dict:
    from bugsnag_notify.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from bugsnag_notify.cli.main import _save_config
    _save_config(cfg)


def _mask(token: str) -> str:
    from bugsnag_notify.cli.main import _mask
    return _mask(token)


@click.group()
def config():
    """Saved notifier defaults."""


@config.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
def config_set(key: str, value: str):
    """Save a default value."""
    cfg = _load_config()
    if key == "notify_release_stages":
        cfg[key] = [s.strip() for s in value.split(",") if s.strip()]
    else:
        cfg[key] = value
    _save_config(cfg)
    shown = _mask(value) if key == "token" else value
    console.print(f"[green]Saved {key} = {shown}[/green]")


@config.command("show")
def config_show():
    """Show saved defaults."""
    cfg = _load_config()
    if not cfg:
        console.print("[yellow]No saved configuration. Run `bugsnag-notify config set`.[/yellow]")
        return
    table = Table(title="bugsnag-notify configuration")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key in CONFIG_KEYS:
        if key not in cfg:
            continue
        value = cfg[key]
        if key == "token":
            value = _mask(value)
        elif isinstance(value, list):
            value = ", ".join(value)
        table.add_row(key, str(value))
    console.print(table)


@config.command("clear")
def config_clear():
    """Remove saved defaults."""
    _save_config({})
    console.print("[green]Configuration cleared.[/green]")
