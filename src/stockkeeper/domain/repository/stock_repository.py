"""Abstract repository for per-variant StockLevel records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockkeeper.domain.model.inventory import StockLevel


class StockRepository(ABC):

    @abstractmethod
    def get_by_variant_id(self, variant_id: str) -> StockLevel | None:
        """Return the stock record for a variant, or None."""

    @abstractmethod
    def list_all(self) -> list[StockLevel]:
        """Return every stock record."""

    @abstractmethod
    def save(self, stock: StockLevel) -> None:
        """Persist a new or updated stock record."""
