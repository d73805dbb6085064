"""Factory helpers for runtime entities."""

from .monster_factory import create_monster
from .player_factory import create_player

__all__ = [
    "create_monster",
    "create_player",
]
