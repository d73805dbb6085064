"""Serialization helpers for the one-line save format.

A save holds exactly four whitespace-separated fields::

    <name> <health> <attack> <defense>

Level and experience are not part of the format, so a loaded player always
starts again at level 1 with no experience.
"""
from __future__ import annotations

from typing import List

from duelsim.domain.entities import Player
from duelsim.services.errors import FactoryError, SaveReadError, SaveWriteError
from duelsim.services.factories import create_player

_FIELD_NAMES: tuple[str, ...] = ("name", "health", "attack", "defense")


class SaveService:
    """Converts a player to/from the persisted text line."""

    def serialize(self, player: Player) -> str:
        """Return the newline-terminated save line for ``player``."""
        name = player.name
        if not name or any(char.isspace() for char in name):
            raise SaveWriteError(f"Player name {name!r} cannot contain whitespace in a save file.")
        stats = player.stats
        return f"{name} {stats.health} {stats.attack} {stats.defense}\n"

    def deserialize(self, text: str) -> Player:
        """Rebuild a level 1 player from a save line."""
        tokens = text.split()
        if len(tokens) != len(_FIELD_NAMES):
            raise SaveReadError(
                f"Save data must contain {len(_FIELD_NAMES)} fields "
                f"({' '.join(_FIELD_NAMES)}); found {len(tokens)}."
            )
        name = tokens[0]
        health, attack, defense = self._require_ints(tokens[1:], _FIELD_NAMES[1:])
        try:
            return create_player(name, health=health, attack=attack, defense=defense)
        except FactoryError as exc:
            raise SaveReadError(f"Invalid player in save data: {exc}") from exc

    @staticmethod
    def _require_ints(tokens: List[str], field_names: tuple[str, ...]) -> List[int]:
        values: List[int] = []
        for token, field_name in zip(tokens, field_names):
            try:
                values.append(int(token))
            except ValueError as exc:
                raise SaveReadError(f"Save field '{field_name}' must be an integer, got {token!r}.") from exc
        return values
