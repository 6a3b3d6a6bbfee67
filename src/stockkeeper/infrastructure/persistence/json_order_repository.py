"""JSON-file-backed implementation of OrderRepository.

An order record embeds its items, inventory units and shipments.
Variants are stored by id and name only; the catalog stays in its own
file.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from stockkeeper.domain.model.inventory import InventoryState, InventoryUnit
from stockkeeper.domain.model.order import Order, OrderItem, OrderState
from stockkeeper.domain.model.shipment import Shipment, ShipmentItem, ShipmentState
from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "state": order.state.value,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "variant_id": item.variant.id,
                    "variant_name": item.variant.name,
                    "quantity": item.quantity,
                }
                for item in order.items
            ],
            "inventory_units": [
                {
                    "id": unit.id,
                    "variant_id": unit.variant.id,
                    "variant_name": unit.variant.name,
                    "inventory_state": unit.inventory_state.value,
                }
                for unit in order.inventory_units
            ],
            "shipments": [
                {
                    "id": shipment.id,
                    "state": shipment.state.value,
                    "items": [
                        {
                            "inventory_unit_id": item.inventory_unit_id,
                            "shipping_state": item.shipping_state.value,
                        }
                        for item in shipment.items
                    ],
                }
                for shipment in order.shipments
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        # One Variant object per id within an order
        variants: dict[str, Variant] = {}

        def variant(record: dict) -> Variant:
            vid = record["variant_id"]
            if vid not in variants:
                variants[vid] = Variant(id=vid, name=record.get("variant_name", ""))
            return variants[vid]

        return Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            items=[
                OrderItem(variant=variant(i), quantity=i["quantity"]) for i in raw["items"]
            ],
            inventory_units=[
                InventoryUnit(
                    id=u["id"],
                    variant=variant(u),
                    inventory_state=InventoryState.parse(u["inventory_state"]),
                )
                for u in raw.get("inventory_units", [])
            ],
            shipments=[
                Shipment(
                    id=s["id"],
                    state=ShipmentState.parse(s["state"]),
                    items=[
                        ShipmentItem(
                            inventory_unit_id=si["inventory_unit_id"],
                            shipping_state=ShipmentState.parse(si["shipping_state"]),
                        )
                        for si in s["items"]
                    ],
                )
                for s in raw.get("shipments", [])
            ],
            state=OrderState(raw["state"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
