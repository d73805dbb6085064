from __future__ import annotations

import pytest

from duelsim.services.errors import SaveReadError, SaveWriteError
from duelsim.services.factories import create_player
from duelsim.services.save_service import SaveService


def test_serialize_writes_single_line() -> None:
    player = create_player("Hero", health=85, attack=20, defense=10)
    assert SaveService().serialize(player) == "Hero 85 20 10\n"


def test_round_trip_preserves_fields_and_resets_progression() -> None:
    service = SaveService()
    player = create_player("Hero", health=85, attack=20, defense=10)
    player.level = 3
    player.experience = 40

    loaded = service.deserialize(service.serialize(player))

    assert loaded.name == "Hero"
    assert (loaded.stats.health, loaded.stats.attack, loaded.stats.defense) == (85, 20, 10)
    # Progression is not part of the save format.
    assert (loaded.level, loaded.experience) == (1, 0)


def test_round_trip_negative_health() -> None:
    service = SaveService()
    loaded = service.deserialize("Hero -20 20 10\n")
    assert loaded.stats.health == -20


def test_serialize_rejects_whitespace_in_name() -> None:
    with pytest.raises(SaveWriteError):
        SaveService().serialize(create_player("Sir Hero"))


@pytest.mark.parametrize(
    "text",
    ["", "Hero 85 20", "Hero 85 20 10 extra", "Hero eighty 20 10", "Hero 85 20 ten"],
)
def test_deserialize_rejects_malformed_text(text: str) -> None:
    with pytest.raises(SaveReadError):
        SaveService().deserialize(text)


def test_deserialize_rejects_negative_defense() -> None:
    with pytest.raises(SaveReadError):
        SaveService().deserialize("Hero 85 20 -3")
