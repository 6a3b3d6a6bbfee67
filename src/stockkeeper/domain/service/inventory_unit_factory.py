"""Factory for new InventoryUnit records."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from stockkeeper.domain.model.inventory import InventoryState, InventoryUnit
from stockkeeper.domain.model.variant import Variant


class InventoryUnitFactory(ABC):

    @abstractmethod
    def create(
        self,
        variant: Variant,
        quantity: int,
        state: InventoryState = InventoryState.CHECKOUT,
    ) -> list[InventoryUnit]:
        """Return ``quantity`` fresh units of ``variant`` in ``state``."""


class UuidInventoryUnitFactory(InventoryUnitFactory):

    def create(
        self,
        variant: Variant,
        quantity: int,
        state: InventoryState = InventoryState.CHECKOUT,
    ) -> list[InventoryUnit]:
        return [
            InventoryUnit(id=uuid.uuid4().hex, variant=variant, inventory_state=state)
            for _ in range(max(quantity, 0))
        ]
