"""Monster presets repository."""
from __future__ import annotations

from typing import Dict

from duelsim.data.errors import DataValidationError
from duelsim.data.repositories.base import RepositoryBase
from duelsim.domain.defs import MonsterDef


class MonstersRepository(RepositoryBase[MonsterDef]):
    """Loads and validates monster preset definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("monsters.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, MonsterDef]:
        monsters: Dict[str, MonsterDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Monster IDs must be strings.")
            monster_data = self._require_mapping(payload, f"monster '{raw_id}'")
            self._assert_exact_fields(
                monster_data, {"name", "health", "attack", "defense"}, f"monster '{raw_id}'"
            )
            health = self._require_int(monster_data["health"], f"monster '{raw_id}' health")
            if health <= 0:
                raise DataValidationError(f"monster '{raw_id}' health must be positive.")
            monsters[raw_id] = MonsterDef(
                id=raw_id,
                name=self._require_str(monster_data["name"], f"monster '{raw_id}' name"),
                health=health,
                attack=self._require_int(monster_data["attack"], f"monster '{raw_id}' attack"),
                defense=self._require_int(monster_data["defense"], f"monster '{raw_id}' defense"),
            )
        return monsters
