"""
bugsnag-notify CLI.

Commands:
  bugsnag-notify config set|show|clear   Saved defaults
  bugsnag-notify send <message>          Report one event
"""

import asyncio
import json
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install bugsnag-notify[cli]")

from bugsnag_notify import __version__

console = Console()
CONFIG_FILE = Path.home() / ".bugsnag-notify" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _mask(token: str) -> str:
    if len(token) <= 4:
        return "****"
    return f"****{token[-4:]}"


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option(__version__)
def main():
    """Report error events to Bugsnag from the command line."""


# Register subcommands from separate modules
from bugsnag_notify.cli.config import config
from bugsnag_notify.cli.send import send_cmd

main.add_command(config)
main.add_command(send_cmd)


if __name__ == "__main__":
    main()
