"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items, the inventory units
allocated to them, and the shipments built from those units.
Business invariants about the order's own lifecycle are enforced here;
keeping units in step with items is the job of the reconciler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from stockkeeper.domain.exceptions import ValidationError
from stockkeeper.domain.model.inventory import InventoryUnit
from stockkeeper.domain.model.shipment import Shipment
from stockkeeper.domain.model.variant import Variant


class OrderState(Enum):
    CART = "CART"
    PLACED = "PLACED"
    COMPLETED = "COMPLETED"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


@dataclass
class OrderItem:
    """A line of the order: which variant, and how many of it.

    ``quantity`` is a plain int so a cart edit can drop it to zero;
    the reconciler treats non-positive quantities as "nothing wanted".
    """

    variant: Variant
    quantity: int


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new carts.  The ``__init__`` is left
    simple so the repository can reconstitute persisted orders.
    """

    id: int | None
    customer_name: str
    items: list[OrderItem] = field(default_factory=list)
    inventory_units: list[InventoryUnit] = field(default_factory=list)
    shipments: list[Shipment] = field(default_factory=list)
    state: OrderState = OrderState.CART
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer_name: str) -> Order:
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        return Order(id=None, customer_name=customer_name.strip())

    # --- Items ----------------------------------------------------------------

    def set_item_quantity(self, variant: Variant, quantity: int) -> None:
        """Set the wanted quantity of ``variant``.

        A quantity of zero or less removes the variant from the cart.
        """
        self._assert_editable()
        if quantity <= 0:
            self.remove_item(variant)
            return
        for item in self.items:
            if item.variant == variant:
                item.quantity = quantity
                return
        self.items.append(OrderItem(variant=variant, quantity=quantity))

    def remove_item(self, variant: Variant) -> None:
        self._assert_editable()
        self.items = [item for item in self.items if item.variant != variant]

    def quantities_by_variant(self) -> dict[Variant, int]:
        """Wanted quantity per variant, in first-seen order.

        Items of the same variant add up; a non-positive quantity
        contributes nothing.
        """
        quantities: dict[Variant, int] = {}
        for item in self.items:
            quantities[item.variant] = quantities.get(item.variant, 0) + max(
                item.quantity, 0
            )
        return quantities

    # --- Inventory units ------------------------------------------------------

    def get_inventory_units_by_variant(self, variant: Variant) -> list[InventoryUnit]:
        """Units referencing ``variant``, in the order they were attached."""
        return [unit for unit in self.inventory_units if unit.variant == variant]

    def add_inventory_unit(self, unit: InventoryUnit) -> None:
        if any(existing is unit for existing in self.inventory_units):
            return
        self.inventory_units.append(unit)

    def remove_inventory_unit(self, unit: InventoryUnit) -> None:
        self.inventory_units = [
            existing for existing in self.inventory_units if existing is not unit
        ]

    # --- State transitions ----------------------------------------------------

    def place(self) -> None:
        """Transition CART -> PLACED (checkout; inventory goes on hold)."""
        if self.state != OrderState.CART:
            raise ValidationError(
                f"Cannot place order — current state is {self.state.value}, "
                f"expected CART"
            )
        if not self.items:
            raise ValidationError("Order must contain at least one item")
        self.state = OrderState.PLACED

    def complete(self) -> None:
        """Transition PLACED -> COMPLETED (paid; inventory is sold)."""
        if self.state != OrderState.PLACED:
            raise ValidationError(
                f"Cannot complete order — current state is {self.state.value}, "
                f"expected PLACED"
            )
        self.state = OrderState.COMPLETED

    def ship(self) -> None:
        """Transition COMPLETED -> SHIPPED."""
        if self.state != OrderState.COMPLETED:
            raise ValidationError(
                f"Cannot ship order — current state is {self.state.value}, "
                f"expected COMPLETED"
            )
        self.state = OrderState.SHIPPED

    def cancel(self) -> None:
        """Transition CART|PLACED -> CANCELLED.

        A PLACED order has stock on hold; it must be released *before*
        calling this.
        """
        if self.state == OrderState.CANCELLED:
            raise ValidationError("Order is already cancelled")
        if self.state not in (OrderState.CART, OrderState.PLACED):
            raise ValidationError(f"Cannot cancel order in {self.state.value} state")
        self.state = OrderState.CANCELLED

    # --- Internal helpers -----------------------------------------------------

    def _assert_editable(self) -> None:
        if self.state != OrderState.CART:
            raise ValidationError(
                f"Cannot edit items of an order in {self.state.value} state"
            )
