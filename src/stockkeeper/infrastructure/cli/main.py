import click

from stockkeeper.infrastructure.cli.cart_commands import cart_create, cart_update
from stockkeeper.infrastructure.cli.order_commands import (
    order_cancel,
    order_complete,
    order_list,
    order_place,
    order_ship,
    order_show,
)
from stockkeeper.infrastructure.cli.stock_commands import stock_set, stock_show
from stockkeeper.infrastructure.cli.variant_commands import variant_add, variant_list
from stockkeeper.infrastructure.config import get_settings
from stockkeeper.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """stockkeeper — order inventory and shipment tracking"""
    configure_logging("DEBUG" if verbose else get_settings().LOG_LEVEL)


@cli.group()
def cart() -> None:
    """Edit carts (inventory units follow the items)."""


@cli.group()
def order() -> None:
    """Move orders through checkout, payment and shipping."""


@cli.group()
def variant() -> None:
    """Manage the variant catalog."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


# Register subcommands
cart.add_command(cart_create)
cart.add_command(cart_update)
order.add_command(order_cancel)
order.add_command(order_complete)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_ship)
order.add_command(order_show)
variant.add_command(variant_add)
variant.add_command(variant_list)
stock.add_command(stock_set)
stock.add_command(stock_show)
