"""Console driver for the scripted duel session."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Sequence

from duelsim.data.errors import DataError
from duelsim.data.repositories import ItemsRepository, MonstersRepository
from duelsim.domain.state import SessionState
from duelsim.presentation.cli import render
from duelsim.presentation.cli.config import SessionConfig, load_config
from duelsim.presentation.cli.event_log import EventLog
from duelsim.presentation.cli.save_file import SaveFileStore
from duelsim.services import (
    BattleService,
    EventLogError,
    FactoryError,
    InventoryError,
    InventoryService,
    SaveLoadError,
    SaveService,
)
from duelsim.services.battle_service import BattleEvent, BattleStartedEvent, describe_event
from duelsim.services.factories import create_player

logger = logging.getLogger(__name__)

SESSION_MONSTERS: tuple[str, ...] = ("goblin", "skeleton", "dragon")
STARTING_ITEMS: tuple[str, ...] = ("health_potion",)


def main() -> int:
    """Run the fixed session with the user's config, if any."""
    config = load_config()
    _configure_logging(config.debug)
    return run_session(config)


def run_session(config: SessionConfig, *, definitions_path: Path | str | None = None) -> int:
    """Play the scripted session and return a process exit status."""
    monsters_repo = MonstersRepository(base_path=definitions_path)
    items_repo = ItemsRepository(base_path=definitions_path)
    battle_service = BattleService(monsters_repo, max_rounds=config.max_rounds)
    inventory_service = InventoryService(items_repo)
    save_service = SaveService()
    store = SaveFileStore(config.save_path)

    event_log = EventLog(config.log_path)
    try:
        event_log.open()
    except EventLogError as exc:
        _report_error(exc)
        return 1

    with event_log:
        try:
            state = _start_session(config, inventory_service)
            for monster_id in SESSION_MONSTERS:
                _fight(monster_id, state, battle_service, event_log)
        except (DataError, EventLogError, FactoryError, InventoryError) as exc:
            _report_error(exc)
            return 1
        _save_game(state, save_service, store)
        _load_game(state, save_service, store)
        render.render_heading("Loaded Character")
        render.render_player_info(state.player)
    return 0


def _report_error(exc: Exception) -> None:
    logger.debug("%s raised", type(exc).__name__, exc_info=exc)
    print(f"Error: {exc}", file=sys.stderr)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _start_session(config: SessionConfig, inventory_service: InventoryService) -> SessionState:
    print("=== Duel Simulator ===")
    print("Welcome to the arena!")
    state = SessionState(player=create_player(config.player_name))
    render.render_player_info(state.player)
    for item_id in STARTING_ITEMS:
        item_def = inventory_service.add_item(state, item_id)
        print(f"Added item: {item_def.name}")
    print(render.format_inventory(inventory_service.list_items(state)))
    return state


def _fight(monster_id: str, state: SessionState, battle_service: BattleService, event_log: EventLog) -> None:
    render.render_heading(f"Encounter {state.encounters_fought + 1}")
    battle_state, events = battle_service.run_battle(monster_id, state)
    lines = _narrate(events)
    event_log.write_lines(lines)
    logger.debug("Encounter %s finished as %s", monster_id, battle_state.outcome)
    render.render_player_info(state.player)


def _narrate(events: Sequence[BattleEvent]) -> List[str]:
    """Print every event and return the lines destined for the event log."""
    lines: List[str] = []
    for event in events:
        line = describe_event(event)
        print(line)
        if isinstance(event, BattleStartedEvent):
            print(render.format_monster_info(event))
            continue
        lines.append(line)
    return lines


def _save_game(state: SessionState, save_service: SaveService, store: SaveFileStore) -> bool:
    try:
        store.write(save_service.serialize(state.player))
    except SaveLoadError as exc:
        _report_error(exc)
        return False
    print(f"Game saved to {store.path}")
    return True


def _load_game(state: SessionState, save_service: SaveService, store: SaveFileStore) -> bool:
    try:
        player = save_service.deserialize(store.read())
    except SaveLoadError as exc:
        _report_error(exc)
        return False
    state.player = player
    print(f"Game loaded from {store.path}")
    return True
