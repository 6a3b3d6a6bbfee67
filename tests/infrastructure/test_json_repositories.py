"""Tests for the JSON-file repositories."""

import json

import pytest

from stockkeeper.domain.exceptions import ValidationError
from stockkeeper.domain.model.inventory import InventoryState, InventoryUnit, StockLevel
from stockkeeper.domain.model.order import Order, OrderItem, OrderState
from stockkeeper.domain.model.shipment import Shipment, ShipmentState
from stockkeeper.domain.model.variant import Variant
from stockkeeper.infrastructure.persistence.json_order_repository import JsonOrderRepository
from stockkeeper.infrastructure.persistence.json_stock_repository import JsonStockRepository
from stockkeeper.infrastructure.persistence.json_variant_repository import (
    JsonVariantRepository,
)

MUG = Variant(id="MUG", name="Mug")


class TestJsonOrderRepository:

    def test_order_graph_survives_reload(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order(id=None, customer_name="Alice", items=[OrderItem(MUG, 2)])
        order.add_inventory_unit(InventoryUnit(id="u1", variant=MUG))
        order.add_inventory_unit(
            InventoryUnit(id="u2", variant=MUG, inventory_state=InventoryState.ON_HOLD)
        )
        order.shipments.append(Shipment.for_units("1-1", ["u1", "u2"]))
        order.state = OrderState.PLACED

        repo.save(order)
        loaded = JsonOrderRepository(tmp_path / "orders.json").get_by_id(1)

        assert loaded.customer_name == "Alice"
        assert loaded.state == OrderState.PLACED
        assert [(i.variant, i.quantity) for i in loaded.items] == [(MUG, 2)]
        assert [(u.id, u.inventory_state) for u in loaded.inventory_units] == [
            ("u1", InventoryState.CHECKOUT),
            ("u2", InventoryState.ON_HOLD),
        ]
        assert len(loaded.get_inventory_units_by_variant(loaded.items[0].variant)) == 2
        assert loaded.shipments[0].state == ShipmentState.CHECKOUT
        assert [i.inventory_unit_id for i in loaded.shipments[0].items] == ["u1", "u2"]

    def test_save_assigns_ids_and_upserts(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first = Order.create("Alice")
        second = Order.create("Bob")
        repo.save(first)
        repo.save(second)

        first.customer_name = "Alicia"
        repo.save(first)

        assert (first.id, second.id) == (1, 2)
        assert [o.customer_name for o in repo.list_all()] == ["Alicia", "Bob"]

    def test_unknown_unit_state_rejected_on_load(self, tmp_path):
        path = tmp_path / "orders.json"
        repo = JsonOrderRepository(path)
        order = Order(id=None, customer_name="Alice", items=[OrderItem(MUG, 1)])
        order.add_inventory_unit(InventoryUnit(id="u1", variant=MUG))
        repo.save(order)

        raw = json.loads(path.read_text())
        raw[0]["inventory_units"][0]["inventory_state"] = "misplaced"
        path.write_text(json.dumps(raw))

        with pytest.raises(ValidationError, match="Unknown inventory state"):
            repo.get_by_id(1)


class TestJsonStockAndVariantRepositories:

    def test_stock_round_trip(self, tmp_path):
        repo = JsonStockRepository(tmp_path / "stock.json")
        repo.save(StockLevel(variant=MUG, on_hand=5, on_hold=2, available_on_demand=True))

        stock = repo.get_by_variant_id("MUG")

        assert (stock.on_hand, stock.on_hold, stock.available_on_demand) == (5, 2, True)
        assert stock.variant.name == "Mug"
        assert repo.get_by_variant_id("CAP") is None

    def test_variant_lookup_by_name(self, tmp_path):
        repo = JsonVariantRepository(tmp_path / "variants.json")
        repo.save(MUG)

        assert repo.get_by_name("mug") == MUG
        assert repo.get_by_name("Hat") is None
        assert repo.list_all() == [MUG]
