"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Sequence, Tuple

from duelsim.domain.entities import Player
from duelsim.services.battle_service import BattleStartedEvent


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def format_player_info(player: Player) -> str:
    stats = player.stats
    return (
        f"Name: {player.name}, HP: {stats.health}, Attack: {stats.attack}, "
        f"Defense: {stats.defense}, Level: {player.level}, Experience: {player.experience}"
    )


def format_monster_info(event: BattleStartedEvent) -> str:
    return (
        f"Monster: {event.monster_name}, HP: {event.monster_health}, "
        f"Attack: {event.monster_attack}, Defense: {event.monster_defense}"
    )


def format_inventory(entries: Sequence[Tuple[str, int]]) -> str:
    if not entries:
        return "Inventory: (empty)"
    parts = [name if quantity == 1 else f"{name} x{quantity}" for name, quantity in entries]
    return "Inventory: " + ", ".join(parts)


def render_player_info(player: Player) -> None:
    """Print the player's stat block."""
    print(format_player_info(player))
