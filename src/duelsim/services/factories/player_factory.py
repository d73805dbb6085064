"""Factory for creating player entities."""
from __future__ import annotations

from duelsim.domain.entities import Player, Stats
from duelsim.services.errors import FactoryError

DEFAULT_PLAYER_HEALTH = 100
DEFAULT_PLAYER_ATTACK = 20
DEFAULT_PLAYER_DEFENSE = 10


def create_player(
    name: str,
    *,
    health: int = DEFAULT_PLAYER_HEALTH,
    attack: int = DEFAULT_PLAYER_ATTACK,
    defense: int = DEFAULT_PLAYER_DEFENSE,
) -> Player:
    """Instantiate a level 1 player with no experience."""
    if not name or not name.strip():
        raise FactoryError("Player name cannot be empty.")
    if attack < 0 or defense < 0:
        raise FactoryError(f"Player '{name}' attack and defense must be non-negative.")
    return Player(name=name, stats=Stats(health=health, attack=attack, defense=defense))
