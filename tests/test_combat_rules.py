import pytest

from duelsim.domain.battle_models import Combatant
from duelsim.domain.combat_rules import is_defeated, net_damage, resolve_attack
from duelsim.domain.entities import Stats


def _combatant(name: str, health: int, attack: int, defense: int, side: str = "player") -> Combatant:
    return Combatant(display_name=name, side=side, stats=Stats(health=health, attack=attack, defense=defense))


@pytest.mark.parametrize(
    ("attack", "defense", "expected"),
    [(20, 5, 15), (10, 10, 0), (5, 15, 0), (1, 0, 1)],
)
def test_resolve_attack_mutates_only_defender_health(attack: int, defense: int, expected: int) -> None:
    attacker = _combatant("Hero", 100, attack, 3)
    defender = _combatant("Goblin", 50, 7, defense, side="monster")

    damage = resolve_attack(attacker, defender)

    assert damage == expected
    assert defender.stats == Stats(health=50 - expected, attack=7, defense=defense)
    assert attacker.stats == Stats(health=100, attack=attack, defense=3)


def test_resolve_attack_can_push_health_negative() -> None:
    attacker = _combatant("Hero", 100, 20, 10)
    defender = _combatant("Goblin", 5, 10, 5, side="monster")

    resolve_attack(attacker, defender)

    assert defender.stats.health == -10
    assert is_defeated(defender)


def test_zero_health_is_not_defeated() -> None:
    combatant = _combatant("Hero", 0, 20, 10)
    assert not is_defeated(combatant)
    combatant.stats.health = -1
    assert is_defeated(combatant)


def test_net_damage_never_negative() -> None:
    weak = _combatant("Hero", 100, 1, 0)
    tough = _combatant("Dragon", 150, 30, 15, side="monster")
    assert net_damage(weak, tough) == 0
    assert net_damage(tough, weak) == 30
