"""Monster runtime models."""
from __future__ import annotations

from dataclasses import dataclass

from .stats import Stats


@dataclass(slots=True)
class Monster:
    """Represents a spawned monster ready for battle."""

    monster_id: str
    name: str
    stats: Stats
