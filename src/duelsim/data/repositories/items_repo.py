"""Items repository."""
from __future__ import annotations

from typing import Dict

from duelsim.data.errors import DataValidationError
from duelsim.data.repositories.base import RepositoryBase
from duelsim.domain.defs import ItemDef


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates item definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Item IDs must be strings.")
            item_data = self._require_mapping(payload, f"item '{raw_id}'")
            self._assert_exact_fields(item_data, {"name", "heal_hp"}, f"item '{raw_id}'")
            heal_hp = self._require_int(item_data["heal_hp"], f"item '{raw_id}' heal_hp")
            if heal_hp < 0:
                raise DataValidationError(f"item '{raw_id}' heal_hp cannot be negative.")
            items[raw_id] = ItemDef(
                id=raw_id,
                name=self._require_str(item_data["name"], f"item '{raw_id}' name"),
                heal_hp=heal_hp,
            )
        return items
