"""Abstract repository for the Variant catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockkeeper.domain.model.variant import Variant


class VariantRepository(ABC):

    @abstractmethod
    def get_by_id(self, variant_id: str) -> Variant | None:
        """Return a variant by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Variant | None:
        """Return a variant by its name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Variant]:
        """Return every variant in the catalog."""

    @abstractmethod
    def save(self, variant: Variant) -> None:
        """Persist a new or updated variant."""
