"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Stores the shared combatant stats."""

    health: int
    attack: int
    defense: int
