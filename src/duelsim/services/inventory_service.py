"""Inventory service for adding, removing and using items."""
from __future__ import annotations

import logging
from typing import List, Tuple

from duelsim.data.repositories import ItemsRepository
from duelsim.domain.defs import ItemDef
from duelsim.domain.progression import heal
from duelsim.domain.state import SessionState
from duelsim.services.errors import InventoryError

logger = logging.getLogger(__name__)


class InventoryService:
    """Validates item operations against item definitions."""

    def __init__(self, items_repo: ItemsRepository) -> None:
        self._items_repo = items_repo

    def add_item(self, state: SessionState, item_id: str, quantity: int = 1) -> ItemDef:
        item_def = self._get_item(item_id)
        if quantity <= 0:
            raise InventoryError("Quantity must be positive.")
        state.inventory.add_item(item_id, quantity)
        return item_def

    def remove_item(self, state: SessionState, item_id: str, quantity: int = 1) -> bool:
        """Return False when the inventory does not hold enough of the item."""
        self._get_item(item_id)
        removed = state.inventory.remove_item(item_id, quantity)
        if not removed:
            logger.info("Item not found in inventory: %s", item_id)
        return removed

    def use_item(self, state: SessionState, item_id: str) -> int:
        """Consume one item and apply its healing; return the player's new health."""
        item_def = self._get_item(item_id)
        if not state.inventory.remove_item(item_id):
            raise InventoryError(f"No {item_def.name} in inventory.")
        return heal(state.player, item_def.heal_hp)

    def list_items(self, state: SessionState) -> List[Tuple[str, int]]:
        """Return (display name, quantity) pairs in the order items were first added."""
        entries: List[Tuple[str, int]] = []
        for item_id, quantity in state.inventory.items.items():
            entries.append((self._get_item(item_id).name, quantity))
        return entries

    def _get_item(self, item_id: str) -> ItemDef:
        try:
            return self._items_repo.get(item_id)
        except KeyError as exc:
            raise InventoryError(f"Unknown item '{item_id}'.") from exc
