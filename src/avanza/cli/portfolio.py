"""CLI: avanza positions"""

import json

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _get_client(ctx):
    from avanza.cli.main import _get_client
    return _get_client(ctx)


def _run(coro):
    from avanza.cli.main import _run
    return _run(coro)


@click.command("positions")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def positions(ctx: click.Context, json_output: bool):
    """Show positions across all accounts."""

    async def _positions():
        async with _get_client(ctx) as client:
            with console.status("Logging in..."):
                await client.authenticate()
            result = await client.positions()
        if json_output:
            click.echo(json.dumps(result.model_dump(by_alias=True), indent=2))
            return
        table = Table(title=f"Positions (total balance {result.total_balance:,.2f})")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("Account")
        table.add_column("Volume", justify="right")
        table.add_column("Value", justify="right")
        table.add_column("Profit %", justify="right")
        for group in result.instrument_positions:
            for p in group.positions:
                table.add_row(
                    p.name, group.instrument_type, p.account_name,
                    f"{p.volume:g}", f"{p.value:,.2f}", f"{p.profit_percent:.2f}",
                )
        console.print(table)

    _run(_positions())
