"""Application service: Update Cart use case.

Applies quantity changes to a cart (0 removes the variant) and
reconciles the order's inventory units afterwards.
"""

from __future__ import annotations

import logging

from stockkeeper.application.create_cart import resolve_variants
from stockkeeper.application.dto import CartItemSpec, OrderDTO, to_order_dto
from stockkeeper.domain.exceptions import EntityNotFoundError
from stockkeeper.domain.repository.order_repository import OrderRepository
from stockkeeper.domain.repository.variant_repository import VariantRepository
from stockkeeper.domain.service.inventory_reconciler import InventoryReconciler

logger = logging.getLogger(__name__)


class UpdateCartHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        variant_repo: VariantRepository,
        reconciler: InventoryReconciler,
    ) -> None:
        self._order_repo = order_repo
        self._variant_repo = variant_repo
        self._reconciler = reconciler

    def handle(self, order_id: int, item_specs: list[CartItemSpec]) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        # Resolve everything before editing so an unknown name leaves the cart as is
        for variant, quantity in resolve_variants(self._variant_repo, item_specs):
            order.set_item_quantity(variant, quantity)

        self._reconciler.reconcile(order)
        self._order_repo.save(order)
        logger.info("Updated cart #%s (%d unit(s))", order.id, len(order.inventory_units))
        return to_order_dto(order)
