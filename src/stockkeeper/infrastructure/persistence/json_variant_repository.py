"""JSON-file-backed implementation of VariantRepository."""

from __future__ import annotations

import json
from pathlib import Path

from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.repository.variant_repository import VariantRepository


class JsonVariantRepository(VariantRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- VariantRepository interface ------------------------------------------

    def get_by_id(self, variant_id: str) -> Variant | None:
        return self._load().get(variant_id)

    def get_by_name(self, name: str) -> Variant | None:
        for variant in self._load().values():
            if variant.name.lower() == name.strip().lower():
                return variant
        return None

    def list_all(self) -> list[Variant]:
        return list(self._load().values())

    def save(self, variant: Variant) -> None:
        variants = self._load()
        variants[variant.id] = variant
        self._persist(variants)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Variant]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: Variant(id=item["id"], name=item["name"]) for item in raw}

    def _persist(self, variants: dict[str, Variant]) -> None:
        raw = [{"id": v.id, "name": v.name} for v in variants.values()]
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
