"""Domain service: Inventory Reconciler.

Keeps the inventory units on an order in step with its items.  Runs
after every cart edit: for each variant on the order it creates or
removes units until the unit count matches the summed item quantity,
then drops units whose variant is no longer on the order at all.

Stock counters are not touched here.  Units created by the reconciler
start in CHECKOUT and only reach the inventory operator when the state
driver moves them.
"""

from __future__ import annotations

import logging

from stockkeeper.domain.model.inventory import InventoryState
from stockkeeper.domain.model.order import Order
from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.service.inventory_unit_factory import InventoryUnitFactory

logger = logging.getLogger(__name__)


class InventoryReconciler:

    def __init__(self, unit_factory: InventoryUnitFactory) -> None:
        self._unit_factory = unit_factory

    def reconcile(self, order: Order) -> None:
        """Make the order's units exactly reflect its item quantities."""
        quantities = order.quantities_by_variant()

        for variant, quantity in quantities.items():
            self._update_variant_units(order, variant, quantity)

        self._remove_unused_units(order, quantities)

    # --- Internal helpers -----------------------------------------------------

    def _update_variant_units(self, order: Order, variant: Variant, quantity: int) -> None:
        units = order.get_inventory_units_by_variant(variant)
        difference = quantity - len(units)

        if difference == 0:
            return

        if difference > 0:
            for unit in self._unit_factory.create(
                variant, difference, InventoryState.CHECKOUT
            ):
                order.add_inventory_unit(unit)
            logger.debug("Added %d unit(s) of %s to order %s", difference, variant.id, order.id)
        else:
            # Oldest units go first; state plays no part in the choice
            for unit in units[:-difference]:
                order.remove_inventory_unit(unit)
            logger.debug(
                "Removed %d unit(s) of %s from order %s", -difference, variant.id, order.id
            )

    @staticmethod
    def _remove_unused_units(order: Order, variants: dict[Variant, int]) -> None:
        orphans = [unit for unit in order.inventory_units if unit.variant not in variants]
        for unit in orphans:
            order.remove_inventory_unit(unit)
        if orphans:
            logger.debug("Removed %d orphaned unit(s) from order %s", len(orphans), order.id)
