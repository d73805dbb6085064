"""Shared type aliases for the core and domain layers."""
from typing import Literal

Side = Literal["player", "monster"]
BattleOutcome = Literal["ongoing", "player_victory", "player_defeat", "draw"]

__all__ = ["BattleOutcome", "Side"]
