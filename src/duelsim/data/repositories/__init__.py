"""Repository exports."""

from .items_repo import ItemsRepository
from .monsters_repo import MonstersRepository

__all__ = [
    "ItemsRepository",
    "MonstersRepository",
]
