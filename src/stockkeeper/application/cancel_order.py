"""Application service: Cancel Order use case.

A PLACED order has stock on hold, which is released before the order
is cancelled.  A CART order is cancelled without stock changes.  Every
shipment of the order is cancelled with it.
"""

from __future__ import annotations

import logging

from stockkeeper.domain.exceptions import EntityNotFoundError
from stockkeeper.domain.model.order import OrderState
from stockkeeper.domain.model.shipment import ShipmentState
from stockkeeper.domain.repository.order_repository import OrderRepository
from stockkeeper.domain.service.inventory_state_driver import InventoryStateDriver
from stockkeeper.domain.service.shipment_processor import ShipmentProcessor

logger = logging.getLogger(__name__)


class CancelOrderHandler:

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

        if order.state == OrderState.PLACED:
            self._driver.release(order)
        order.cancel()

        self._processor.update_shipment_states(order.shipments, ShipmentState.CANCELLED)

        self._order_repo.save(order)
        logger.info("Order #%s cancelled", order.id)
