"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from stockkeeper.domain.model.order import Order


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (variant name + quantity)."""

    variant_name: str
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: one item with a count of its units per inventory state."""

    variant_id: str
    variant_name: str
    quantity: int
    unit_states: dict[str, int]


@dataclass(frozen=True)
class ShipmentDTO:
    id: str
    state: str
    item_states: dict[str, int]


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    state: str
    items: list[OrderItemDTO]
    shipments: list[ShipmentDTO]
    unit_count: int
    created_at: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        state=order.state.value,
        items=[
            OrderItemDTO(
                variant_id=item.variant.id,
                variant_name=str(item.variant),
                quantity=item.quantity,
                unit_states=dict(
                    Counter(
                        unit.inventory_state.value
                        for unit in order.get_inventory_units_by_variant(item.variant)
                    )
                ),
            )
            for item in order.items
        ],
        shipments=[
            ShipmentDTO(
                id=shipment.id,
                state=shipment.state.value,
                item_states=dict(Counter(i.shipping_state.value for i in shipment.items)),
            )
            for shipment in order.shipments
        ],
        unit_count=len(order.inventory_units),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
