"""Shipment aggregate: what leaves the warehouse for an order.

A Shipment owns its items.  Each item points at the inventory unit it
carries and has its own shipping state, settable independently of the
shipment's state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from stockkeeper.domain.exceptions import ValidationError


class ShipmentState(Enum):
    CHECKOUT = "checkout"
    ON_HOLD = "onhold"
    PENDING = "pending"
    READY = "ready"
    SHIPPED = "shipped"
    RETURNED = "returned"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, raw: str | ShipmentState) -> ShipmentState:
        """Coerce a raw value, rejecting anything outside the enumeration."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError as exc:
            raise ValidationError(f"Unknown shipment state: {raw!r}") from exc


@dataclass(eq=False)
class ShipmentItem:
    inventory_unit_id: str
    shipping_state: ShipmentState = ShipmentState.CHECKOUT


@dataclass(eq=False)
class Shipment:
    id: str
    state: ShipmentState = ShipmentState.CHECKOUT
    items: list[ShipmentItem] = field(default_factory=list)

    @staticmethod
    def for_units(shipment_id: str, unit_ids: list[str]) -> Shipment:
        """Build a new shipment carrying one item per inventory unit."""
        if not unit_ids:
            raise ValidationError("A shipment must carry at least one unit")
        return Shipment(
            id=shipment_id,
            items=[ShipmentItem(inventory_unit_id=uid) for uid in unit_ids],
        )
