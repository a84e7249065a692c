"""CLI: bugsnag-notify send"""

import json
from typing import Optional

import click
from rich.console import Console

from bugsnag_notify.client import create_client
from bugsnag_notify.errors import BugsnagNotifyError
from bugsnag_notify.models.config import Configuration
from bugsnag_notify.models.severity import Severity
from bugsnag_notify.notifier import build_request, should_send

console = Console()


def _load_config() -> dict:
    from bugsnag_notify.cli.main import _load_config
    return _load_config()


def _mask(token: str) -> str:
    from bugsnag_notify.cli.main import _mask
    return _mask(token)


def _run(coro):
    from bugsnag_notify.cli.main import _run
    return _run(coro)


def _parse_meta(pairs: tuple[str, ...]) -> dict:
    """Parse key=value pairs; values that parse as JSON are kept typed."""
    metadata = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--meta")
        try:
            metadata[key] = json.loads(raw)
        except json.JSONDecodeError:
            metadata[key] = raw
    return metadata


def _build_config(saved: dict, overrides: dict) -> Configuration:
    merged = {**saved, **{k: v for k, v in overrides.items() if v is not None}}
    data = {k: merged.get(k) for k in ("token", "code_version", "context", "release_stage")}
    data = {k: v for k, v in data.items() if v is not None}
    data["notify_release_stages"] = merged.get("notify_release_stages") or []
    if merged.get("user_id"):
        data["user"] = {
            "id": merged["user_id"],
            "username": merged.get("user_name", ""),
            "email": merged.get("user_email", ""),
        }
    return Configuration.from_mapping(data)


@click.command("send")
@click.argument("message")
@click.option("-s", "--severity", type=click.Choice([s.value for s in Severity]), default="error", show_default=True)
@click.option("-m", "--meta", "meta", multiple=True, help="Metadata as key=value (repeatable)")
@click.option("--state", default=None, help="Application state text, sent as metaData.model")
@click.option("--token", envvar="BUGSNAG_API_KEY", default=None, help="Ingestion API key")
@click.option("--app-version", "code_version", default=None)
@click.option("--context", default=None)
@click.option("--release-stage", default=None)
@click.option("--notify-stage", "notify_stages", multiple=True, help="Allowed release stage (repeatable)")
@click.option("--dry-run", is_flag=True, help="Print the request instead of sending it")
def send_cmd(message: str, severity: str, meta: tuple[str, ...], state: Optional[str], token: Optional[str],
             code_version: Optional[str], context: Optional[str], release_stage: Optional[str],
             notify_stages: tuple[str, ...], dry_run: bool):
    """Report a single event."""
    metadata = _parse_meta(meta)
    describe_state = (lambda: state) if state is not None else None
    try:
        cfg = _build_config(_load_config(), {
            "token": token,
            "code_version": code_version,
            "context": context,
            "release_stage": release_stage,
            "notify_release_stages": list(notify_stages) or None,
        })
    except BugsnagNotifyError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    level = Severity(severity)
    if dry_run:
        try:
            request = build_request(cfg, level, message, metadata, describe_state)
        except BugsnagNotifyError as e:
            console.print(f"[red]{e}[/red]")
            raise SystemExit(1)
        headers = {**request.headers, "Bugsnag-Api-Key": _mask(cfg.token)}
        console.print(f"[bold]{request.method}[/bold] {request.url}")
        for name, value in headers.items():
            console.print(f"[dim]{name}: {value}[/dim]")
        click.echo(json.dumps(json.loads(request.body), indent=2))
        if not should_send(cfg):
            console.print(f"[yellow]Release stage {cfg.release_stage!r} would be suppressed.[/yellow]")
        return

    if not should_send(cfg):
        console.print(f"[yellow]Suppressed: release stage {cfg.release_stage!r} is not in "
                      f"{', '.join(cfg.notify_release_stages)}.[/yellow]")
        return

    async def _send():
        async with create_client(cfg) as client:
            await client.notify(level, message, metadata, describe_state)

    try:
        with console.status("Sending..."):
            _run(_send())
    except BugsnagNotifyError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    console.print(f"[green]Sent {severity}: {message}[/green]")
