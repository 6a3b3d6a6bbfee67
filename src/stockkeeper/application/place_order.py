"""Application service: Place Order use case.

Checkout: moves the cart to PLACED, puts its inventory on hold and
builds the shipment that will carry the held units.
"""

from __future__ import annotations

import logging

from stockkeeper.domain.exceptions import EntityNotFoundError
from stockkeeper.domain.model.shipment import Shipment, ShipmentState
from stockkeeper.domain.repository.order_repository import OrderRepository
from stockkeeper.domain.service.inventory_state_driver import InventoryStateDriver
from stockkeeper.domain.service.shipment_processor import ShipmentProcessor

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        driver: InventoryStateDriver,
        processor: ShipmentProcessor,
    ) -> None:
        self._order_repo = order_repo
        self._driver = driver
        self._processor = processor

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        # State check first so a rejected checkout holds no stock
        order.place()
        self._driver.hold(order)

        shipment = Shipment.for_units(
            f"{order.id}-{len(order.shipments) + 1}",
            [unit.id for unit in order.inventory_units],
        )
        order.shipments.append(shipment)
        self._processor.update_shipment_states(
            order.shipments, ShipmentState.ON_HOLD, ShipmentState.CHECKOUT
        )

        self._order_repo.save(order)
        logger.info("Order #%s placed — inventory on hold", order.id)
