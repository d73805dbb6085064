"""Runtime entity exports."""

from .monster import Monster
from .player import Player
from .stats import Stats

__all__ = [
    "Monster",
    "Player",
    "Stats",
]
