"""CLI entry point for the designernews tool.

This module is the composition root of the application.  It is the only
place that imports concrete implementations (DesignerNewsClient, TokenAuth,
the token stores).  All other layers depend solely on abstractions.
"""

import asyncio
import json
import logging
import os
import sys
from dataclasses import asdict
from enum import Enum

# Ensure UTF-8 output on Windows where stdout may default to cp1252.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

import typer
from rich.console import Console
from rich.table import Table

from designernews.auth import credentials as creds_store
from designernews.auth.interfaces import TokenStore
from designernews.auth.login import LoginRemoteDataSource
from designernews.auth.token_store import FileTokenStore
from designernews.core.exceptions import LoginError
from designernews.core.models import ClientIdentity
from designernews.providers.designernews.auth import TokenAuth
from designernews.providers.designernews.client import DesignerNewsClient
from designernews.services.login_service import LoginService

app = typer.Typer()
auth_app = typer.Typer(help="Manage Designer News authentication.")

app.add_typer(auth_app, name="auth")

console = Console(legacy_windows=False)

_USER_AGENT = "designernews/0.1"
_ENV_CLIENT_ID = "DESIGNER_NEWS_CLIENT_ID"
_ENV_CLIENT_SECRET = "DESIGNER_NEWS_CLIENT_SECRET"
_ENV_ACCESS_TOKEN = "DESIGNER_NEWS_ACCESS_TOKEN"


# ---------------------------------------------------------------------------
# Output format
# ---------------------------------------------------------------------------


class OutputFormat(str, Enum):
    """Supported output formats for the status command."""

    table = "table"
    json = "json"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_identity() -> ClientIdentity:
    """Read the OAuth client identity from the environment.

    Unset variables yield empty strings; only the login command needs them.
    """
    return ClientIdentity(
        client_id=os.getenv(_ENV_CLIENT_ID, ""),
        client_secret=os.getenv(_ENV_CLIENT_SECRET, ""),
    )


def _token_source(store: TokenStore) -> str:
    if isinstance(store, FileTokenStore):
        return str(store.path)
    return "memory"


def _resolve_status_token(store: TokenStore) -> tuple[str | None, str]:
    """Return the token shown by ``auth status`` and where it came from.

    The store wins; ``DESIGNER_NEWS_ACCESS_TOKEN`` is consulted only when
    the store holds no token.
    """
    token = store.get()
    if token:
        return token, _token_source(store)
    env_token = os.getenv(_ENV_ACCESS_TOKEN)
    if env_token:
        return env_token, "environment variable"
    return None, _token_source(store)


def _get_service() -> LoginService:
    """Build and return a LoginService backed by the Designer News client."""
    store = FileTokenStore()
    client = DesignerNewsClient(user_agent=_USER_AGENT, auth=TokenAuth(store))
    remote = LoginRemoteDataSource(
        token_store=store, service=client, identity=_get_identity()
    )
    return LoginService(remote)


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
):
    """Designer News command-line client."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


# ---------------------------------------------------------------------------
# auth commands
# ---------------------------------------------------------------------------


@auth_app.command()
def login(
    username: str = typer.Option(
        None, "--username", "-u", help="Designer News username or email."
    ),
):
    """Log in with a username and password."""
    service = _get_service()
    identity = service.remote.identity
    if not identity.client_id or not identity.client_secret:
        console.print(
            f"[red]{_ENV_CLIENT_ID} and {_ENV_CLIENT_SECRET} must be set.[/red]"
        )
        console.print(
            "Register an application with Designer News and export its "
            "client credentials before logging in."
        )
        raise typer.Exit(1)
    if username is None:
        username = typer.prompt("Username")
    password = typer.prompt("Password", hide_input=True)

    try:
        user = asyncio.run(service.login(username, password))
    except LoginError as e:
        console.print(f"[red]Login failed:[/red] {e}")
        raise typer.Exit(1)

    name = user.display_name or username
    console.print(f"[green]✓ Logged in as[/green] [bold]{name}[/bold]")


@auth_app.command()
def logout():
    """Log out and remove the stored token and user."""
    service = _get_service()
    was_logged_in = service.is_logged_in
    service.logout()
    if was_logged_in:
        console.print("[green]✓ Logged out.[/green]")
    else:
        console.print("[yellow]Not logged in.[/yellow]")


@auth_app.command()
def status(
    output: OutputFormat = typer.Option(
        OutputFormat.table, "--output", "-o", help="Output format."
    ),
):
    """Show the logged-in user and where the token is stored."""
    service = _get_service()
    token, source = _resolve_status_token(service.remote.token_store)
    has_token = token is not None

    if output == OutputFormat.json:
        print(
            json.dumps(
                {
                    "logged_in": service.is_logged_in,
                    "has_token": has_token,
                    "token_source": source,
                    "user": asdict(service.user) if service.user else None,
                },
                indent=2,
            )
        )
        if not service.is_logged_in:
            raise typer.Exit(1)
        return

    if not service.is_logged_in:
        console.print("[yellow]Not logged in.[/yellow]")
        console.print("Run [bold]designernews auth login[/bold].")
        raise typer.Exit(1)

    user = service.user
    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("User ID", str(user.id))
    table.add_row("Name", user.display_name or "—")
    table.add_row(
        "Token",
        source if has_token else "[red]missing[/red]",
    )
    table.add_row("Profile", str(creds_store.user_path()))
    console.print(table)
