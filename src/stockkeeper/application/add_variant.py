"""Application service: Add Variant use case."""

from __future__ import annotations

import re

from stockkeeper.domain.exceptions import ValidationError
from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.repository.variant_repository import VariantRepository


class AddVariantHandler:

    def __init__(self, variant_repo: VariantRepository) -> None:
        self._variant_repo = variant_repo

    def handle(self, name: str, sku: str | None = None) -> Variant:
        """Add a new variant to the catalog.

        Without an explicit ``sku`` one is derived from the name,
        e.g. "Blue Mug" -> "BLUE-MUG".
        """
        if not name or not name.strip():
            raise ValidationError("Variant name is required")

        if self._variant_repo.get_by_name(name) is not None:
            raise ValidationError(f"Variant '{name}' already exists")

        variant_id = (sku or re.sub(r"[^A-Za-z0-9]+", "-", name.strip()).strip("-")).upper()
        if self._variant_repo.get_by_id(variant_id) is not None:
            raise ValidationError(f"SKU '{variant_id}' already exists")

        variant = Variant(id=variant_id, name=name.strip())
        self._variant_repo.save(variant)
        return variant
