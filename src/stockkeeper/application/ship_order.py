"""Application service: Ship Order use case."""

from __future__ import annotations

import logging

from stockkeeper.domain.exceptions import EntityNotFoundError
from stockkeeper.domain.model.shipment import ShipmentState
from stockkeeper.domain.repository.order_repository import OrderRepository
from stockkeeper.domain.service.shipment_processor import ShipmentProcessor

logger = logging.getLogger(__name__)


class ShipOrderHandler:

    def __init__(self, order_repo: OrderRepository, processor: ShipmentProcessor) -> None:
        self._order_repo = order_repo
        self._processor = processor

    def handle(self, order_id: int) -> None:
        """Dispatch every READY shipment; others are left as they are."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.ship()
        self._processor.update_shipment_states(
            order.shipments, ShipmentState.SHIPPED, ShipmentState.READY
        )

        self._order_repo.save(order)
        logger.info("Order #%s shipped", order.id)
