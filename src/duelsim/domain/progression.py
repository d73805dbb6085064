"""Experience, leveling and healing rules for the player."""
from __future__ import annotations

from duelsim.domain.entities import Player

EXPERIENCE_PER_LEVEL = 100
PLAYER_MAX_HEALTH = 100


def gain_experience(player: Player, amount: int) -> int:
    """Add experience and level up as often as it allows.

    Each level consumes exactly ``EXPERIENCE_PER_LEVEL`` points and the
    remainder carries forward. Returns the number of levels gained.
    """
    if amount < 0:
        raise ValueError("Experience awards cannot be negative.")
    player.experience += amount
    levels_gained = 0
    while player.experience >= EXPERIENCE_PER_LEVEL:
        player.level += 1
        player.experience -= EXPERIENCE_PER_LEVEL
        levels_gained += 1
    return levels_gained


def heal(player: Player, amount: int) -> int:
    """Restore health, clamped to ``PLAYER_MAX_HEALTH``; return the new health."""
    player.stats.health = min(PLAYER_MAX_HEALTH, player.stats.health + amount)
    return player.stats.health
