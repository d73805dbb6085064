"""Player models."""
from __future__ import annotations

from dataclasses import dataclass

from .stats import Stats


@dataclass(slots=True)
class Player:
    """Represents the player character and its progression."""

    name: str
    stats: Stats
    level: int = 1
    experience: int = 0
