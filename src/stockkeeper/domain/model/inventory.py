"""Inventory model: per-unit records and per-variant stock counters.

An InventoryUnit is one physical unit allocated to an order.  Its state
only changes through the transition table below, so a unit can never be
moved along an edge the lifecycle does not define.

A StockLevel holds the aggregate counters for one variant.  Units are
tracked one by one on the order; StockLevel is what the inventory
operator keeps in sync with them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stockkeeper.domain.exceptions import InsufficientStockError, ValidationError
from stockkeeper.domain.model.variant import Variant


class InventoryState(Enum):
    CHECKOUT = "checkout"
    ON_HOLD = "onhold"
    SOLD = "sold"
    BACKORDERED = "backordered"
    RETURNED = "returned"

    @classmethod
    def parse(cls, raw: str | InventoryState) -> InventoryState:
        """Coerce a raw value, rejecting anything outside the enumeration."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError as exc:
            raise ValidationError(f"Unknown inventory state: {raw!r}") from exc


class InventoryTransition(Enum):
    HOLD = "hold"
    RELEASE = "release"
    SELL = "sell"


_TRANSITIONS: dict[tuple[InventoryState, InventoryTransition], InventoryState] = {
    (InventoryState.CHECKOUT, InventoryTransition.HOLD): InventoryState.ON_HOLD,
    (InventoryState.ON_HOLD, InventoryTransition.RELEASE): InventoryState.CHECKOUT,
    (InventoryState.CHECKOUT, InventoryTransition.SELL): InventoryState.SOLD,
    (InventoryState.ON_HOLD, InventoryTransition.SELL): InventoryState.SOLD,
}


def can_apply(state: InventoryState, transition: InventoryTransition) -> bool:
    return (state, transition) in _TRANSITIONS


@dataclass(eq=False)
class InventoryUnit:
    """One unit of stock allocated to an order.

    Compared by identity: two units of the same variant in the same
    state are still distinct records.
    """

    id: str
    variant: Variant
    inventory_state: InventoryState = InventoryState.CHECKOUT

    def apply(self, transition: InventoryTransition) -> None:
        """Move the unit along ``transition``.

        Raises ValidationError if the current state has no such edge.
        """
        target = _TRANSITIONS.get((self.inventory_state, transition))
        if target is None:
            raise ValidationError(
                f"Cannot {transition.value} inventory unit {self.id} "
                f"in state {self.inventory_state.value}"
            )
        self.inventory_state = target

    def __repr__(self) -> str:
        return (
            f"InventoryUnit(id={self.id!r}, variant={self.variant.id!r}, "
            f"state={self.inventory_state.value})"
        )


@dataclass
class StockLevel:
    """Aggregate stock counters for a single variant.

    Invariants:
    - ``on_hold`` is never negative
    - ``on_hand`` is never negative unless the variant is available on demand
    """

    variant: Variant
    on_hand: int
    on_hold: int = 0
    available_on_demand: bool = False

    @property
    def available(self) -> int:
        return self.on_hand - self.on_hold

    def check_hold(self, quantity: int) -> None:
        """Raise if ``quantity`` could not be put on hold right now."""
        if quantity < 0:
            raise ValidationError("Hold quantity cannot be negative")
        if quantity > self.available and not self.available_on_demand:
            raise InsufficientStockError(
                f"Insufficient stock for {self.variant} "
                f"(need {quantity}, have {self.available} available)"
            )

    def hold(self, quantity: int) -> None:
        """Reserve stock for an order that entered checkout."""
        self.check_hold(quantity)
        self.on_hold += quantity

    def release(self, quantity: int) -> None:
        """Give previously held stock back."""
        if quantity < 0:
            raise ValidationError("Release quantity cannot be negative")
        if quantity > self.on_hold:
            raise ValidationError(
                f"Cannot release {quantity} of {self.variant} "
                f"— only {self.on_hold} currently on hold"
            )
        self.on_hold -= quantity

    def decrease(self, quantity: int) -> None:
        """Permanently remove sold stock from the shelf."""
        if quantity < 0:
            raise ValidationError("Decrease quantity cannot be negative")
        if quantity > self.on_hand and not self.available_on_demand:
            raise InsufficientStockError(
                f"Cannot decrease {self.variant} by {quantity} "
                f"— only {self.on_hand} on hand"
            )
        self.on_hand -= quantity
