"""Shared helpers for CLI commands."""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..config import ConfigError, GraphSettings, Settings
from ..http_client import HttpxHttpClient


def fail(console: Console, title: str, message: str) -> NoReturn:
    """Print an error panel and exit with status 1."""
    console.print(Panel(f"[red]{escape(message)}[/red]", title=title, border_style="red"))
    raise typer.Exit(1) from None


def load_settings(console: Console) -> GraphSettings:
    try:
        return Settings.load()
    except ConfigError as e:
        fail(console, "Configuration Error", str(e))


def resolve_credentials(
    console: Console, settings: GraphSettings, app_id: int | None, app_secret: str | None
) -> tuple[int, str]:
    """Command line values win over FB_APP_ID / FB_APP_SECRET."""
    app_id = app_id if app_id is not None else settings.app_id
    app_secret = app_secret or settings.app_secret

    missing = []
    if app_id is None:
        missing.append("--app-id (or FB_APP_ID)")
    if not app_secret:
        missing.append("--app-secret (or FB_APP_SECRET)")
    if missing:
        fail(console, "Missing Credentials", "Required: " + ", ".join(missing))

    return app_id, app_secret


def http_client(settings: GraphSettings) -> HttpxHttpClient:
    return HttpxHttpClient(settings.http_client_config())
