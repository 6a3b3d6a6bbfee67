"""Inventory operator: aggregate stock bookkeeping behind the unit records.

The reconciler and state driver manage per-unit records on the order.
Whatever has to happen to the shared per-variant counters is delegated
to an InventoryOperator, so the core never decides availability itself.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from stockkeeper.domain.exceptions import EntityNotFoundError, ValidationError
from stockkeeper.domain.model.inventory import InventoryState, InventoryUnit, StockLevel
from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)


class InventoryOperator(ABC):

    @abstractmethod
    def hold(self, variant: Variant, quantity: int) -> None:
        """Put ``quantity`` of ``variant`` on hold."""

    @abstractmethod
    def release(self, variant: Variant, quantity: int) -> None:
        """Give ``quantity`` of ``variant`` back from hold."""

    @abstractmethod
    def decrease(self, units: Iterable[InventoryUnit]) -> None:
        """Remove sold ``units`` from stock on hand."""

    def check_hold(self, quantities: Mapping[Variant, int]) -> None:
        """Raise if any of ``quantities`` could not be held.

        Called with every quantity of a checkout before the first
        ``hold``, so a failure leaves no stock held.  Accepts everything
        by default.
        """


class StockOperator(InventoryOperator):
    """InventoryOperator backed by StockLevel records.

    A zero quantity is a no-op: the state driver reports residuals
    unconditionally and most of them are zero.
    """

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def hold(self, variant: Variant, quantity: int) -> None:
        if self._skip(quantity):
            return
        stock = self._load(variant)
        stock.hold(quantity)
        self._stock_repo.save(stock)
        logger.info("Held %d of %s (on_hold=%d)", quantity, variant.id, stock.on_hold)

    def check_hold(self, quantities: Mapping[Variant, int]) -> None:
        for variant, quantity in quantities.items():
            if self._skip(quantity):
                continue
            self._load(variant).check_hold(quantity)

    def release(self, variant: Variant, quantity: int) -> None:
        if self._skip(quantity):
            return
        stock = self._load(variant)
        stock.release(quantity)
        self._stock_repo.save(stock)
        logger.info(
            "Released %d of %s (on_hold=%d)", quantity, variant.id, stock.on_hold
        )

    def decrease(self, units: Iterable[InventoryUnit]) -> None:
        """Decrease on-hand stock by the number of SOLD units per variant.

        Units in any other state are ignored; every variant is validated
        before any counter changes.
        """
        sold: dict[Variant, int] = {}
        for unit in units:
            if unit.inventory_state == InventoryState.SOLD:
                sold[unit.variant] = sold.get(unit.variant, 0) + 1

        # Phase 1: load every record first so a missing one fails fast
        records = [(self._load(variant), qty) for variant, qty in sold.items()]

        # Phase 2: mutate and persist
        for stock, qty in records:
            stock.decrease(qty)
            self._stock_repo.save(stock)
            logger.info(
                "Decreased %s by %d (on_hand=%d)", stock.variant.id, qty, stock.on_hand
            )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _skip(quantity: int) -> bool:
        if quantity < 0:
            raise ValidationError(f"Stock quantity cannot be negative, got {quantity}")
        return quantity == 0

    def _load(self, variant: Variant) -> StockLevel:
        stock = self._stock_repo.get_by_variant_id(variant.id)
        if stock is None:
            raise EntityNotFoundError(f"No stock record for variant '{variant}'")
        return stock
