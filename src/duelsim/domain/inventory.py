"""Player inventory structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class Inventory:
    """Item counts keyed by item id, kept in insertion order."""

    items: Dict[str, int] = field(default_factory=dict)

    def add_item(self, item_id: str, quantity: int = 1) -> None:
        if quantity <= 0:
            return
        self.items[item_id] = self.items.get(item_id, 0) + quantity

    def remove_item(self, item_id: str, quantity: int = 1) -> bool:
        if quantity <= 0:
            return True
        current = self.items.get(item_id, 0)
        if current < quantity:
            return False
        new_value = current - quantity
        if new_value == 0:
            self.items.pop(item_id, None)
        else:
            self.items[item_id] = new_value
        return True
