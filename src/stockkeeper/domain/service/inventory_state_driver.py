"""Domain service: Inventory State Driver.

Moves an order's inventory units through their lifecycle as the order
moves through checkout, cancellation and payment, and tells the
inventory operator how much aggregate stock to adjust.

Items of the same variant add up, as they do for the reconciler, so
the driver works per variant.  For every variant it works out, before
touching any unit:

* the *movable* units: those the transition applies to, and
* the *remaining* quantity: the part of the wanted quantity not already
  accounted for by units outside the tracked state.

The movable units are transitioned and ``remaining`` is reported to the
operator.  Units already mid-transition are never counted twice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stockkeeper.domain.model.inventory import (
    InventoryState,
    InventoryTransition,
    InventoryUnit,
    can_apply,
)
from stockkeeper.domain.model.order import Order
from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.service.inventory_operator import InventoryOperator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionPlan:
    """Units to move for one variant and the quantity left for the operator."""

    variant: Variant
    units: list[InventoryUnit]
    movable: list[InventoryUnit]
    remaining: int


class InventoryStateDriver:

    def __init__(self, operator: InventoryOperator) -> None:
        self._operator = operator

    def hold(self, order: Order) -> None:
        """Put checkout units on hold and reserve the rest of each variant.

        Uses a two-phase approach:
          Phase 1: plan every variant and let the operator check the
                   quantities.  Nothing has changed if this fails.
          Phase 2: transition the units and hold the stock.
        """
        plans = self._plan_order(order, InventoryTransition.HOLD, InventoryState.CHECKOUT)
        self._operator.check_hold({plan.variant: plan.remaining for plan in plans})

        for plan in plans:
            self._apply(plan.movable, InventoryTransition.HOLD)
            self._operator.hold(plan.variant, plan.remaining)

    def release(self, order: Order) -> None:
        """Return held units to checkout and release the rest of each variant."""
        for plan in self._plan_order(
            order, InventoryTransition.RELEASE, InventoryState.ON_HOLD
        ):
            self._apply(plan.movable, InventoryTransition.RELEASE)
            self._operator.release(plan.variant, plan.remaining)

    def update(self, order: Order) -> None:
        """Mark held and checkout units as sold and settle stock.

        Only units sold by this call are passed to ``decrease``, so
        running it again on a settled order leaves stock alone.
        """
        for plan in self._plan_order(
            order, InventoryTransition.SELL, InventoryState.ON_HOLD
        ):
            self._apply(plan.movable, InventoryTransition.SELL)
            self._operator.decrease(plan.movable)
            self._operator.release(plan.variant, plan.remaining)

    @staticmethod
    def plan(
        order: Order,
        variant: Variant,
        quantity: int,
        transition: InventoryTransition,
        tracked: InventoryState,
    ) -> TransitionPlan:
        """Partition the variant's units and derive the residual quantity.

        ``remaining`` is the wanted quantity minus the units that are
        *not* in ``tracked``.  It is clamped at zero; a negative residual
        means the order has more units than its items ask for.
        """
        units = order.get_inventory_units_by_variant(variant)
        settled = sum(1 for unit in units if unit.inventory_state != tracked)
        remaining = max(quantity, 0) - settled
        if remaining < 0:
            logger.warning(
                "Order %s has %d more %s unit(s) than item quantity %d; clamping to 0",
                order.id, -remaining, variant.id, quantity,
            )
            remaining = 0

        movable = [unit for unit in units if can_apply(unit.inventory_state, transition)]
        return TransitionPlan(
            variant=variant, units=units, movable=movable, remaining=remaining
        )

    # --- Internal helpers -----------------------------------------------------

    def _plan_order(
        self, order: Order, transition: InventoryTransition, tracked: InventoryState
    ) -> list[TransitionPlan]:
        return [
            self.plan(order, variant, quantity, transition, tracked)
            for variant, quantity in order.quantities_by_variant().items()
        ]

    @staticmethod
    def _apply(units: list[InventoryUnit], transition: InventoryTransition) -> None:
        for unit in units:
            unit.apply(transition)
        if units:
            logger.debug("Applied %s to %d unit(s)", transition.value, len(units))
