"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from stockkeeper.domain.repository.stock_repository import StockRepository


@dataclass(frozen=True)
class StockLineDTO:
    variant_id: str
    variant_name: str
    on_hand: int
    on_hold: int
    available: int
    available_on_demand: bool


class ShowStockHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def handle(self) -> list[StockLineDTO]:
        return [
            StockLineDTO(
                variant_id=stock.variant.id,
                variant_name=str(stock.variant),
                on_hand=stock.on_hand,
                on_hold=stock.on_hold,
                available=stock.available,
                available_on_demand=stock.available_on_demand,
            )
            for stock in self._stock_repo.list_all()
        ]
