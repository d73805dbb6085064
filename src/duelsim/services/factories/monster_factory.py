"""Factory for creating monster instances from presets."""
from __future__ import annotations

from duelsim.data.repositories import MonstersRepository
from duelsim.domain.entities import Monster, Stats
from duelsim.services.errors import FactoryError


def create_monster(monster_id: str, monsters_repo: MonstersRepository) -> Monster:
    """Instantiate a fresh monster using the preset stored under ``monster_id``."""
    try:
        monster_def = monsters_repo.get(monster_id)
    except KeyError as exc:
        raise FactoryError(f"Monster '{monster_id}' not found.") from exc

    stats = Stats(
        health=monster_def.health,
        attack=monster_def.attack,
        defense=monster_def.defense,
    )
    return Monster(monster_id=monster_def.id, name=monster_def.name, stats=stats)
