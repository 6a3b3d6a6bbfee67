"""CLI commands for the Order lifecycle."""

from __future__ import annotations

import click

from stockkeeper.application.cancel_order import CancelOrderHandler
from stockkeeper.application.complete_order import CompleteOrderHandler
from stockkeeper.application.dto import OrderDTO
from stockkeeper.application.place_order import PlaceOrderHandler
from stockkeeper.application.ship_order import ShipOrderHandler
from stockkeeper.application.show_order import ShowOrderHandler
from stockkeeper.domain.exceptions import DomainException
from stockkeeper.infrastructure.bootstrap import (
    inventory_state_driver,
    order_repository,
    shipment_processor,
)


def _format_states(states: dict[str, int]) -> str:
    return ", ".join(f"{state}={count}" for state, count in sorted(states.items())) or "-"


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (state={dto.state})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Variant':<20} {'Qty':>5}  Units")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.variant_name:<20} {item.quantity:>5}  {_format_states(item.unit_states)}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Units':<20} {dto.unit_count:>5}")

    for shipment in dto.shipments:
        click.echo(
            f"  Shipment {shipment.id}: {shipment.state}  "
            f"({_format_states(shipment.item_states)})"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all orders."""
    dtos = ShowOrderHandler(order_repo=order_repository()).list_all()

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'State':<10} {'Units':>6}")
    click.echo("-" * 45)
    for dto in dtos:
        click.echo(f"{dto.id:<6} {dto.customer_name:<20} {dto.state:<10} {dto.unit_count:>6}")


@click.command("place")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to place.")
def order_place(order_id: int) -> None:
    """Check out a cart (puts inventory on hold)."""
    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        driver=inventory_state_driver(),
        processor=shipment_processor(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} placed — inventory on hold.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order (releases held inventory if placed)."""
    handler = CancelOrderHandler(
        order_repo=order_repository(),
        driver=inventory_state_driver(),
        processor=shipment_processor(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to complete.")
def order_complete(order_id: int) -> None:
    """Complete a placed order (units sold, stock decreased)."""
    handler = CompleteOrderHandler(
        order_repo=order_repository(),
        driver=inventory_state_driver(),
        processor=shipment_processor(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} completed — inventory sold.")


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to ship.")
def order_ship(order_id: int) -> None:
    """Ship a completed order."""
    handler = ShipOrderHandler(
        order_repo=order_repository(),
        processor=shipment_processor(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} shipped.")
