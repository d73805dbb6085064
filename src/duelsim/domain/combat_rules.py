"""Deterministic damage resolution rules."""
from __future__ import annotations

from duelsim.domain.battle_models import Combatant


def net_damage(attacker: Combatant, defender: Combatant) -> int:
    """Return the damage an attack would deal, never below zero."""
    return max(0, attacker.stats.attack - defender.stats.defense)


def resolve_attack(attacker: Combatant, defender: Combatant) -> int:
    """Apply one attack and return the damage dealt.

    Only the defender's health changes. An attack whose attack value does not
    exceed the defender's defense leaves the defender untouched and returns 0.
    Health is allowed to drop below zero.
    """
    damage = net_damage(attacker, defender)
    if damage > 0:
        defender.stats.health -= damage
    return damage


def is_defeated(combatant: Combatant) -> bool:
    """Return True once health is strictly below zero (0 HP still stands)."""
    return combatant.is_defeated
