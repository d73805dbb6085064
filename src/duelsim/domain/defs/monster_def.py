"""Monster definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class MonsterDef:
    """Fixed stat preset for a monster variant."""

    id: str
    name: str
    health: int
    attack: int
    defense: int
