"""Application service: Set Stock use case."""

from __future__ import annotations

from stockkeeper.domain.exceptions import EntityNotFoundError, ValidationError
from stockkeeper.domain.model.inventory import StockLevel
from stockkeeper.domain.repository.stock_repository import StockRepository
from stockkeeper.domain.repository.variant_repository import VariantRepository


class SetStockHandler:

    def __init__(
        self,
        stock_repo: StockRepository,
        variant_repo: VariantRepository,
    ) -> None:
        self._stock_repo = stock_repo
        self._variant_repo = variant_repo

    def handle(
        self,
        variant_name: str,
        on_hand: int,
        available_on_demand: bool | None = None,
    ) -> StockLevel:
        """Set the on-hand quantity for a variant.

        Stock already on hold is kept; on-hand may not drop below it.
        """
        variant = self._variant_repo.get_by_name(variant_name)
        if variant is None:
            raise EntityNotFoundError(f"Variant not found: '{variant_name}'")
        if on_hand < 0:
            raise ValidationError("On-hand quantity cannot be negative")

        stock = self._stock_repo.get_by_variant_id(variant.id)
        if stock is None:
            stock = StockLevel(variant=variant, on_hand=on_hand)
        elif on_hand < stock.on_hold:
            raise ValidationError(
                f"Cannot set {variant} to {on_hand} — {stock.on_hold} already on hold"
            )
        else:
            stock.on_hand = on_hand

        if available_on_demand is not None:
            stock.available_on_demand = available_on_demand

        self._stock_repo.save(stock)
        return stock
