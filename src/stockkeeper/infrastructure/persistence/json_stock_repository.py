"""JSON-file-backed implementation of StockRepository."""

from __future__ import annotations

import json
from pathlib import Path

from stockkeeper.domain.model.inventory import StockLevel
from stockkeeper.domain.model.variant import Variant
from stockkeeper.domain.repository.stock_repository import StockRepository


class JsonStockRepository(StockRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- StockRepository interface --------------------------------------------

    def get_by_variant_id(self, variant_id: str) -> StockLevel | None:
        for raw in self._load_raw():
            if raw["variant_id"] == variant_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[StockLevel]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, stock: StockLevel) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["variant_id"] == stock.variant.id:
                records[i] = self._to_raw(stock)
                break
        else:
            records.append(self._to_raw(stock))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(stock: StockLevel) -> dict:
        return {
            "variant_id": stock.variant.id,
            "variant_name": stock.variant.name,
            "on_hand": stock.on_hand,
            "on_hold": stock.on_hold,
            "available_on_demand": stock.available_on_demand,
        }

    @staticmethod
    def _to_domain(raw: dict) -> StockLevel:
        return StockLevel(
            variant=Variant(id=raw["variant_id"], name=raw.get("variant_name", "")),
            on_hand=raw["on_hand"],
            on_hold=raw.get("on_hold", 0),
            available_on_demand=raw.get("available_on_demand", False),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
