from __future__ import annotations

from pathlib import Path

import pytest

from duelsim.presentation.cli.event_log import EventLog
from duelsim.services.errors import EventLogError


def test_lines_are_appended_across_sessions(tmp_path: Path) -> None:
    path = tmp_path / "game_log.txt"

    with EventLog(path) as log:
        log.write("Hero attacks Goblin for 15 damage!")
    with EventLog(path) as log:
        log.write_lines(["Goblin attacks Hero for 5 damage!", "Goblin has been defeated!"])

    assert path.read_text(encoding="utf-8").splitlines() == [
        "Hero attacks Goblin for 15 damage!",
        "Goblin attacks Hero for 5 damage!",
        "Goblin has been defeated!",
    ]


def test_open_failure_raises(tmp_path: Path) -> None:
    with pytest.raises(EventLogError):
        EventLog(tmp_path / "missing_dir" / "game_log.txt").open()


def test_write_before_open_raises(tmp_path: Path) -> None:
    with pytest.raises(EventLogError):
        EventLog(tmp_path / "game_log.txt").write("too early")


def test_close_is_idempotent(tmp_path: Path) -> None:
    log = EventLog(tmp_path / "game_log.txt").open()
    log.close()
    log.close()
