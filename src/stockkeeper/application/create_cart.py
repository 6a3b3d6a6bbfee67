"""Application service: Create Cart use case.

Resolves the requested variants, builds a new order in CART state and
reconciles its inventory units before persisting it.
"""

from __future__ import annotations

import logging

from stockkeeper.application.dto import CartItemSpec, OrderDTO, to_order_dto
from stockkeeper.domain.exceptions import EntityNotFoundError, ValidationError
from stockkeeper.domain.model.order import Order
from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.repository.order_repository import OrderRepository
from stockkeeper.domain.repository.variant_repository import VariantRepository
from stockkeeper.domain.service.inventory_reconciler import InventoryReconciler

logger = logging.getLogger(__name__)


def resolve_variants(
    variant_repo: VariantRepository, specs: list[CartItemSpec]
) -> list[tuple[Variant, int]]:
    """Map each spec's variant name to a Variant.

    Fails if a name is unknown or names a variant listed earlier, so a
    repeated name never silently overrides the first quantity.
    """
    resolved: list[tuple[Variant, int]] = []
    for spec in specs:
        variant = variant_repo.get_by_name(spec.variant_name)
        if variant is None:
            raise EntityNotFoundError(f"Variant not found: '{spec.variant_name}'")
        if any(seen == variant for seen, _ in resolved):
            raise ValidationError(f"Variant '{variant}' is listed more than once")
        resolved.append((variant, spec.quantity))
    return resolved


class CreateCartHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        variant_repo: VariantRepository,
        reconciler: InventoryReconciler,
    ) -> None:
        self._order_repo = order_repo
        self._variant_repo = variant_repo
        self._reconciler = reconciler

    def handle(self, customer_name: str, item_specs: list[CartItemSpec]) -> OrderDTO:
        if not item_specs:
            raise ValidationError("Cart must contain at least one item")

        order = Order.create(customer_name)
        for variant, quantity in resolve_variants(self._variant_repo, item_specs):
            if quantity <= 0:
                raise ValidationError(f"Quantity for {variant} must be positive")
            order.set_item_quantity(variant, quantity)

        self._reconciler.reconcile(order)
        self._order_repo.save(order)
        logger.info(
            "Created cart #%s for %s with %d unit(s)",
            order.id, order.customer_name, len(order.inventory_units),
        )
        return to_order_dto(order)
