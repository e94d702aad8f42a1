"""
Avanza CLI: `avanza` command.

Commands:
  avanza auth login        Username/password + TOTP login check
  avanza positions         Show account positions

Credentials come from AVANZA_USERNAME, AVANZA_PASSWORD and AVANZA_TOTP_SECRET.
Sessions are never saved; every command logs in again.
"""

import asyncio
import logging
from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install avanza-client[cli]")

from avanza.client import AsyncAvanza
from avanza.config import ClientConfig
from avanza.errors import AvanzaError, ConfigurationError

console = Console()


def _get_client(ctx: click.Context) -> AsyncAvanza:
    config = ClientConfig.from_env()
    base_url: Optional[str] = ctx.obj.get("base_url") if ctx.obj else None
    if base_url:
        config = config.with_base_url(base_url)
    try:
        return AsyncAvanza.from_env(config=config)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def _run(coro):
    try:
        return asyncio.run(coro)
    except AvanzaError as e:
        console.print(f"[red]{type(e).__name__}: {e}[/red]")
        raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
@click.option("--base-url", default=None, help="Avanza base URL")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def main(ctx: click.Context, base_url: Optional[str], verbose: bool):
    """Avanza CLI: two-factor login and account data."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if verbose:
        logging.getLogger("avanza").setLevel(logging.DEBUG)
    else:
        logging.getLogger("httpx").setLevel(logging.WARNING)
    ctx.obj = {"base_url": base_url}


# Register subcommands from separate modules
from avanza.cli.auth import auth
from avanza.cli.portfolio import positions

main.add_command(auth)
main.add_command(positions)


if __name__ == "__main__":
    main()
