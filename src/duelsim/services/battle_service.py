"""Battle service handling deterministic one-on-one combat."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from duelsim.core.types import BattleOutcome
from duelsim.data.repositories import MonstersRepository
from duelsim.domain.battle_models import BattleState, Combatant
from duelsim.domain.combat_rules import net_damage, resolve_attack
from duelsim.domain.progression import gain_experience
from duelsim.domain.state import SessionState
from duelsim.services.factories import create_monster

logger = logging.getLogger(__name__)

VICTORY_EXPERIENCE = 50
DEFAULT_MAX_ROUNDS = 1000


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    monster_id: str
    monster_name: str
    monster_health: int
    monster_attack: int
    monster_defense: int


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    attacker_name: str
    target_name: str
    damage: int
    target_health: int


@dataclass(slots=True)
class AttackNoEffectEvent(BattleEvent):
    attacker_name: str
    target_name: str


@dataclass(slots=True)
class CombatantDefeatedEvent(BattleEvent):
    combatant_name: str
    side: str


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    outcome: BattleOutcome
    monster_name: str
    rounds: int


@dataclass(slots=True)
class ExpGainedEvent(BattleEvent):
    player_name: str
    amount: int
    experience: int


@dataclass(slots=True)
class LevelUpEvent(BattleEvent):
    player_name: str
    level: int


def describe_event(event: BattleEvent) -> str:
    """Return the narration line for a battle event."""
    if isinstance(event, BattleStartedEvent):
        return f"A wild {event.monster_name} appeared!"
    if isinstance(event, AttackResolvedEvent):
        return f"{event.attacker_name} attacks {event.target_name} for {event.damage} damage!"
    if isinstance(event, AttackNoEffectEvent):
        return f"{event.attacker_name}'s attack has no effect!"
    if isinstance(event, CombatantDefeatedEvent):
        if event.side == "player":
            return f"{event.combatant_name} has died!"
        return f"{event.combatant_name} has been defeated!"
    if isinstance(event, BattleResolvedEvent):
        if event.outcome == "player_victory":
            return f"Victory against {event.monster_name} after {event.rounds} round(s)."
        if event.outcome == "player_defeat":
            return f"Defeated by {event.monster_name} after {event.rounds} round(s)."
        return f"The battle against {event.monster_name} ends in a stalemate after {event.rounds} round(s)."
    if isinstance(event, ExpGainedEvent):
        return f"{event.player_name} gains {event.amount} experience."
    if isinstance(event, LevelUpEvent):
        return f"{event.player_name} leveled up to level {event.level}!"
    raise TypeError(f"Unsupported battle event: {type(event).__name__}")


class BattleService:
    """Deterministic battle orchestrator for a player against one monster."""

    def __init__(
        self,
        monsters_repo: MonstersRepository,
        *,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        victory_experience: int = VICTORY_EXPERIENCE,
    ) -> None:
        if max_rounds <= 0:
            raise ValueError("max_rounds must be positive.")
        self._monsters_repo = monsters_repo
        self._max_rounds = max_rounds
        self._victory_experience = victory_experience

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(self, monster_id: str, state: SessionState) -> tuple[BattleState, List[BattleEvent]]:
        """Spawn a fresh monster and open an encounter against it."""
        monster = create_monster(monster_id, monsters_repo=self._monsters_repo)
        battle_state = BattleState(
            player=Combatant(display_name=state.player.name, side="player", stats=state.player.stats),
            monster=Combatant(display_name=monster.name, side="monster", stats=monster.stats),
            max_rounds=self._max_rounds,
        )
        events: List[BattleEvent] = [
            BattleStartedEvent(
                monster_id=monster.monster_id,
                monster_name=monster.name,
                monster_health=monster.stats.health,
                monster_attack=monster.stats.attack,
                monster_defense=monster.stats.defense,
            )
        ]
        logger.debug("Battle started: %s vs %s", state.player.name, monster.name)

        if battle_state.player.is_defeated:
            events.extend(self._resolve(battle_state, state, "player_defeat"))
        elif (
            net_damage(battle_state.player, battle_state.monster) == 0
            and net_damage(battle_state.monster, battle_state.player) == 0
        ):
            # Neither side can ever hurt the other.
            events.extend(self._resolve(battle_state, state, "draw"))
        return battle_state, events

    def run_round(self, battle_state: BattleState, state: SessionState) -> List[BattleEvent]:
        """Play one round: the player strikes, then the monster if it still stands."""
        if battle_state.is_over:
            raise ValueError("Battle is already over.")
        battle_state.rounds += 1
        player = battle_state.player
        monster = battle_state.monster

        events = self._attack(player, monster)
        if monster.is_defeated:
            events.append(CombatantDefeatedEvent(combatant_name=monster.display_name, side=monster.side))
            events.extend(self._resolve(battle_state, state, "player_victory"))
            return events

        events.extend(self._attack(monster, player))
        if player.is_defeated:
            events.append(CombatantDefeatedEvent(combatant_name=player.display_name, side=player.side))
            events.extend(self._resolve(battle_state, state, "player_defeat"))
        elif battle_state.rounds >= battle_state.max_rounds:
            logger.warning(
                "Round cap of %d reached against %s; ending in a draw.",
                battle_state.max_rounds,
                monster.display_name,
            )
            events.extend(self._resolve(battle_state, state, "draw"))
        return events

    def run_battle(self, monster_id: str, state: SessionState) -> tuple[BattleState, List[BattleEvent]]:
        """Fight a full encounter and return its final state and every event."""
        battle_state, events = self.start_battle(monster_id, state)
        while not battle_state.is_over:
            events.extend(self.run_round(battle_state, state))
        state.encounters_fought += 1
        return battle_state, events

    # -----------------------
    # Helpers
    # -----------------------
    def _attack(self, attacker: Combatant, target: Combatant) -> List[BattleEvent]:
        damage = resolve_attack(attacker, target)
        if damage > 0:
            return [
                AttackResolvedEvent(
                    attacker_name=attacker.display_name,
                    target_name=target.display_name,
                    damage=damage,
                    target_health=target.stats.health,
                )
            ]
        return [AttackNoEffectEvent(attacker_name=attacker.display_name, target_name=target.display_name)]

    def _resolve(
        self, battle_state: BattleState, state: SessionState, outcome: BattleOutcome
    ) -> List[BattleEvent]:
        battle_state.outcome = outcome
        events: List[BattleEvent] = [
            BattleResolvedEvent(
                outcome=outcome,
                monster_name=battle_state.monster.display_name,
                rounds=battle_state.rounds,
            )
        ]
        logger.info(
            "Battle against %s resolved as %s after %d round(s)",
            battle_state.monster.display_name,
            outcome,
            battle_state.rounds,
        )
        if outcome == "player_victory":
            events.extend(self._award_experience(state))
        return events

    def _award_experience(self, state: SessionState) -> List[BattleEvent]:
        player = state.player
        starting_level = player.level
        levels_gained = gain_experience(player, self._victory_experience)
        events: List[BattleEvent] = [
            ExpGainedEvent(player_name=player.name, amount=self._victory_experience, experience=player.experience)
        ]
        for offset in range(1, levels_gained + 1):
            events.append(LevelUpEvent(player_name=player.name, level=starting_level + offset))
        return events
