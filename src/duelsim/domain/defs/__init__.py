"""Domain definition exports."""

from .item_def import ItemDef
from .monster_def import MonsterDef

__all__ = [
    "ItemDef",
    "MonsterDef",
]
