"""Domain-level session state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field

from duelsim.domain.entities import Player
from duelsim.domain.inventory import Inventory


@dataclass
class SessionState:
    """Mutable state carried across the encounters of one session."""

    player: Player
    inventory: Inventory = field(default_factory=Inventory)
    encounters_fought: int = 0
