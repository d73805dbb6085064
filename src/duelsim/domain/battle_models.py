"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass

from duelsim.core.types import BattleOutcome, Side
from duelsim.domain.entities import Stats


@dataclass(slots=True)
class Combatant:
    """Represents an individual participant in battle."""

    display_name: str
    side: Side
    stats: Stats  # shared with the owning entity so damage persists

    @property
    def is_defeated(self) -> bool:
        return self.stats.health < 0


@dataclass(slots=True)
class BattleState:
    """Tracks the state of a single encounter."""

    player: Combatant
    monster: Combatant
    max_rounds: int
    rounds: int = 0
    outcome: BattleOutcome = "ongoing"

    @property
    def is_over(self) -> bool:
        return self.outcome != "ongoing"
