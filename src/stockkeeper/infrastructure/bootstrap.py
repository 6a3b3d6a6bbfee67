"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stockkeeper.domain.service.inventory_operator import StockOperator
from stockkeeper.domain.service.inventory_reconciler import InventoryReconciler
from stockkeeper.domain.service.inventory_state_driver import InventoryStateDriver
from stockkeeper.domain.service.inventory_unit_factory import UuidInventoryUnitFactory
from stockkeeper.domain.service.shipment_processor import ShipmentProcessor
from stockkeeper.infrastructure.config import get_settings
from stockkeeper.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from stockkeeper.infrastructure.persistence.json_stock_repository import (
    JsonStockRepository,
)
from stockkeeper.infrastructure.persistence.json_variant_repository import (
    JsonVariantRepository,
)


def variant_repository() -> JsonVariantRepository:
    return JsonVariantRepository(get_settings().DATA_DIR / "variants.json")


def stock_repository() -> JsonStockRepository:
    return JsonStockRepository(get_settings().DATA_DIR / "stock.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().DATA_DIR / "orders.json")


def inventory_reconciler() -> InventoryReconciler:
    return InventoryReconciler(UuidInventoryUnitFactory())


def inventory_state_driver() -> InventoryStateDriver:
    return InventoryStateDriver(StockOperator(stock_repository()))


def shipment_processor() -> ShipmentProcessor:
    return ShipmentProcessor()
