"""Variant, a purchasable stock-keeping unit.

Variants live in the catalog, outside of any order.  The inventory
core never mutates them; it only uses them as lookup keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stockkeeper.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Variant:
    """Identity token for a SKU.

    Equality and hashing use ``id`` only, so two Variant objects loaded
    separately for the same SKU group together during reconciliation.
    """

    id: str
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Variant ID is required")

    def __str__(self) -> str:
        return self.name or self.id
