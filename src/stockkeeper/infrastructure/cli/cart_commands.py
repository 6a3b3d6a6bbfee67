"""CLI commands for editing carts."""

from __future__ import annotations

import click

from stockkeeper.application.create_cart import CreateCartHandler
from stockkeeper.application.dto import CartItemSpec
from stockkeeper.application.update_cart import UpdateCartHandler
from stockkeeper.domain.exceptions import DomainException
from stockkeeper.infrastructure.bootstrap import (
    inventory_reconciler,
    order_repository,
    variant_repository,
)
from stockkeeper.infrastructure.cli.order_commands import display_order


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Blue Mug:3,Red Mug:0' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'VariantName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for variant '{name}'."
            )
        specs.append(CartItemSpec(variant_name=name.strip(), quantity=qty))
    return specs


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Items as 'Variant:Qty,Variant:Qty'.")
def cart_create(customer: str, items: str) -> None:
    """Create a new cart."""
    specs = _parse_items(items)

    handler = CreateCartHandler(
        order_repo=order_repository(),
        variant_repo=variant_repository(),
        reconciler=inventory_reconciler(),
    )

    try:
        dto = handler.handle(customer_name=customer, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID of the cart.")
@click.option("--items", required=True, help="New quantities as 'Variant:Qty'; 0 removes.")
def cart_update(order_id: int, items: str) -> None:
    """Change item quantities of a cart."""
    specs = _parse_items(items)

    handler = UpdateCartHandler(
        order_repo=order_repository(),
        variant_repo=variant_repository(),
        reconciler=inventory_reconciler(),
    )

    try:
        dto = handler.handle(order_id, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
