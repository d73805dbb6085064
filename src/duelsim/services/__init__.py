"""Service layer exports."""

from .battle_service import BattleService
from .errors import (
    EventLogError,
    FactoryError,
    InventoryError,
    SaveLoadError,
    SaveReadError,
    SaveWriteError,
)
from .inventory_service import InventoryService
from .save_service import SaveService

__all__ = [
    "BattleService",
    "EventLogError",
    "FactoryError",
    "InventoryError",
    "InventoryService",
    "SaveLoadError",
    "SaveReadError",
    "SaveService",
    "SaveWriteError",
]
