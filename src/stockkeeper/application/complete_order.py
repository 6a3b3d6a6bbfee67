"""Application service: Complete Order use case.

Payment confirmed: held and checkout units become SOLD, stock on hand
is decreased, and held shipments become ready for dispatch.
"""

from __future__ import annotations

import logging

from stockkeeper.domain.exceptions import EntityNotFoundError
from stockkeeper.domain.model.shipment import ShipmentState
from stockkeeper.domain.repository.order_repository import OrderRepository
from stockkeeper.domain.service.inventory_state_driver import InventoryStateDriver
from stockkeeper.domain.service.shipment_processor import ShipmentProcessor

logger = logging.getLogger(__name__)


class CompleteOrderHandler:

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

        order.complete()
        self._driver.update(order)
        self._processor.update_shipment_states(
            order.shipments, ShipmentState.READY, ShipmentState.ON_HOLD
        )

        self._order_repo.save(order)
        logger.info("Order #%s completed — inventory sold", order.id)
