"""Integration tests for place / cancel / complete / ship use cases.

Runs the real StockOperator against in-memory stock so the unit states
and the aggregate counters can be checked together.
"""

import pytest

from stockkeeper.application.cancel_order import CancelOrderHandler
from stockkeeper.application.complete_order import CompleteOrderHandler
from stockkeeper.application.create_cart import CreateCartHandler
from stockkeeper.application.dto import CartItemSpec
from stockkeeper.application.place_order import PlaceOrderHandler
from stockkeeper.application.ship_order import ShipOrderHandler
from stockkeeper.application.show_order import ShowOrderHandler
from stockkeeper.domain.exceptions import EntityNotFoundError, InsufficientStockError, ValidationError
from stockkeeper.domain.model.inventory import InventoryState, StockLevel
from stockkeeper.domain.model.order import OrderItem, OrderState
from stockkeeper.domain.model.shipment import ShipmentState
from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.service.inventory_operator import StockOperator
from stockkeeper.domain.service.inventory_reconciler import InventoryReconciler
from stockkeeper.domain.service.inventory_state_driver import InventoryStateDriver
from stockkeeper.domain.service.inventory_unit_factory import UuidInventoryUnitFactory
from stockkeeper.domain.service.shipment_processor import ShipmentProcessor
from tests.fakes import (
    FakeOrderRepository,
    FakeStockRepository,
    FakeVariantRepository,
    SequentialUnitFactory,
)

MUG = Variant(id="MUG", name="Mug")
CAP = Variant(id="CAP", name="Cap")


class _World:
    def __init__(self, mug_stock: int = 10, cap_stock: int = 5) -> None:
        self.orders = FakeOrderRepository()
        self.variants = FakeVariantRepository([MUG, CAP])
        self.stock = FakeStockRepository(
            [StockLevel(variant=MUG, on_hand=mug_stock), StockLevel(variant=CAP, on_hand=cap_stock)]
        )
        self.driver = InventoryStateDriver(StockOperator(self.stock))
        self.processor = ShipmentProcessor()

    def cart(self, *specs: tuple[str, int]) -> int:
        handler = CreateCartHandler(
            self.orders, self.variants, InventoryReconciler(SequentialUnitFactory())
        )
        return handler.handle("Alice", [CartItemSpec(n, q) for n, q in specs]).id

    def place(self, order_id: int) -> None:
        PlaceOrderHandler(self.orders, self.driver, self.processor).handle(order_id)

    def cancel(self, order_id: int) -> None:
        CancelOrderHandler(self.orders, self.driver, self.processor).handle(order_id)

    def complete(self, order_id: int) -> None:
        CompleteOrderHandler(self.orders, self.driver, self.processor).handle(order_id)

    def ship(self, order_id: int) -> None:
        ShipOrderHandler(self.orders, self.processor).handle(order_id)

    def level(self, variant_id: str) -> tuple[int, int]:
        stock = self.stock.get_by_variant_id(variant_id)
        return stock.on_hand, stock.on_hold

    def unit_states(self, order_id: int) -> set[InventoryState]:
        return {u.inventory_state for u in self.orders.get_by_id(order_id).inventory_units}


class TestPlaceOrder:

    def test_place_holds_stock_and_builds_shipment(self):
        world = _World()
        oid = world.cart(("Mug", 3), ("Cap", 1))

        world.place(oid)

        order = world.orders.get_by_id(oid)
        assert order.state == OrderState.PLACED
        assert world.unit_states(oid) == {InventoryState.ON_HOLD}
        assert world.level("MUG") == (10, 3)
        assert world.level("CAP") == (5, 1)

        (shipment,) = order.shipments
        assert shipment.id == f"{oid}-1"
        assert shipment.state == ShipmentState.ON_HOLD
        assert {i.inventory_unit_id for i in shipment.items} == {u.id for u in order.inventory_units}
        assert {i.shipping_state for i in shipment.items} == {ShipmentState.ON_HOLD}

    def test_insufficient_stock_rejected(self):
        world = _World(mug_stock=2)
        oid = world.cart(("Mug", 3))

        with pytest.raises(InsufficientStockError, match="Insufficient stock for Mug"):
            world.place(oid)

        assert world.level("MUG") == (2, 0)

    def test_no_partial_hold_when_a_later_variant_runs_out(self):
        world = _World(mug_stock=5, cap_stock=0)
        oid = world.cart(("Mug", 2), ("Cap", 1))

        with pytest.raises(InsufficientStockError, match="Insufficient stock for Cap"):
            world.place(oid)

        assert world.level("MUG") == (5, 0)
        assert world.level("CAP") == (0, 0)
        assert world.unit_states(oid) == {InventoryState.CHECKOUT}
        assert world.orders.get_by_id(oid).shipments == []

    def test_duplicate_items_hold_and_sell_once(self):
        world = _World()
        oid = world.cart(("Mug", 2))
        order = world.orders.get_by_id(oid)
        order.items.append(OrderItem(variant=MUG, quantity=1))
        InventoryReconciler(UuidInventoryUnitFactory()).reconcile(order)
        world.place(oid)
        assert world.level("MUG") == (10, 3)

        world.complete(oid)

        assert world.level("MUG") == (7, 0)
        assert world.unit_states(oid) == {InventoryState.SOLD}

    def test_place_twice_rejected(self):
        world = _World()
        oid = world.cart(("Mug", 1))
        world.place(oid)

        with pytest.raises(ValidationError, match="expected CART"):
            world.place(oid)

        assert world.level("MUG") == (10, 1)

    def test_unknown_order_rejected(self):
        with pytest.raises(EntityNotFoundError):
            _World().place(42)


class TestCancelOrder:

    def test_cancel_placed_releases_stock(self):
        world = _World()
        oid = world.cart(("Mug", 3))
        world.place(oid)

        world.cancel(oid)

        order = world.orders.get_by_id(oid)
        assert order.state == OrderState.CANCELLED
        assert world.unit_states(oid) == {InventoryState.CHECKOUT}
        assert world.level("MUG") == (10, 0)
        assert order.shipments[0].state == ShipmentState.CANCELLED
        assert {i.shipping_state for i in order.shipments[0].items} == {ShipmentState.CANCELLED}

    def test_cancel_cart_touches_no_stock(self):
        world = _World()
        oid = world.cart(("Mug", 3))

        world.cancel(oid)

        assert world.orders.get_by_id(oid).state == OrderState.CANCELLED
        assert world.level("MUG") == (10, 0)


class TestCompleteAndShip:

    def test_complete_sells_units_and_decreases_stock(self):
        world = _World()
        oid = world.cart(("Mug", 3), ("Cap", 2))
        world.place(oid)

        world.complete(oid)

        order = world.orders.get_by_id(oid)
        assert order.state == OrderState.COMPLETED
        assert world.unit_states(oid) == {InventoryState.SOLD}
        assert world.level("MUG") == (7, 0)
        assert world.level("CAP") == (3, 0)
        assert order.shipments[0].state == ShipmentState.READY

    def test_ship_moves_ready_shipments(self):
        world = _World()
        oid = world.cart(("Mug", 1))
        world.place(oid)
        world.complete(oid)

        world.ship(oid)

        order = world.orders.get_by_id(oid)
        assert order.state == OrderState.SHIPPED
        assert order.shipments[0].state == ShipmentState.SHIPPED
        assert order.shipments[0].items[0].shipping_state == ShipmentState.SHIPPED

    def test_show_order_summarises_units_and_shipments(self):
        world = _World()
        oid = world.cart(("Mug", 2))
        world.place(oid)

        dto = ShowOrderHandler(world.orders).handle(oid)

        assert dto.state == "PLACED"
        assert dto.items[0].unit_states == {"onhold": 2}
        assert dto.shipments[0].state == "onhold"
        assert dto.shipments[0].item_states == {"onhold": 2}
