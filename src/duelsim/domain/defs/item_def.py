"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ItemDef:
    """Consumable item definition."""

    id: str
    name: str
    heal_hp: int = 0
