"""CLI commands for stock levels."""

from __future__ import annotations

import click

from stockkeeper.application.set_stock import SetStockHandler
from stockkeeper.application.show_stock import ShowStockHandler
from stockkeeper.domain.exceptions import DomainException
from stockkeeper.infrastructure.bootstrap import stock_repository, variant_repository


@click.command("set")
@click.option("--variant", required=True, help="Variant name.")
@click.option("--on-hand", "on_hand", required=True, type=int, help="Units on the shelf.")
@click.option(
    "--on-demand/--no-on-demand",
    "on_demand",
    default=None,
    help="Allow selling beyond stock on hand.",
)
def stock_set(variant: str, on_hand: int, on_demand: bool | None) -> None:
    """Set the stock level of a variant."""
    handler = SetStockHandler(
        stock_repo=stock_repository(),
        variant_repo=variant_repository(),
    )

    try:
        stock = handler.handle(variant, on_hand, available_on_demand=on_demand)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{variant}' set to {stock.on_hand} on hand")


@click.command("show")
def stock_show() -> None:
    """Show current stock levels."""
    lines = ShowStockHandler(stock_repo=stock_repository()).handle()

    if not lines:
        click.echo("No stock records found.")
        return

    click.echo(f"{'Variant':<20} {'On hand':>8} {'On hold':>8} {'Available':>10}")
    click.echo("-" * 50)
    for line in lines:
        suffix = "  (on demand)" if line.available_on_demand else ""
        click.echo(
            f"{line.variant_name:<20} {line.on_hand:>8} {line.on_hold:>8} {line.available:>10}{suffix}"
        )
