"""CLI: avanza auth login"""

import click
from rich.console import Console

console = Console()


def _get_client(ctx):
    from avanza.cli.main import _get_client
    return _get_client(ctx)


def _run(coro):
    from avanza.cli.main import _run
    return _run(coro)


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.pass_context
def auth_login(ctx: click.Context):
    """Log in with username, password and TOTP."""

    async def _login():
        async with _get_client(ctx) as client:
            with console.status("Logging in..."):
                await client.authenticate()
            console.print(f"[green]Logged in[/green] to {client.api_url} (customer {client.customer_id or 'unknown'})")

    _run(_login())
