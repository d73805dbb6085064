from __future__ import annotations

from pathlib import Path

from duelsim.presentation.cli import app
from duelsim.presentation.cli.config import SessionConfig
from duelsim.services.errors import SaveWriteError


def _config(tmp_path: Path, **overrides) -> SessionConfig:
    values = {"log_path": tmp_path / "game_log.txt", "save_path": tmp_path / "save.txt"}
    values.update(overrides)
    return SessionConfig(**values)


def test_full_session_script(tmp_path: Path, capsys) -> None:
    config = _config(tmp_path)

    status = app.run_session(config)

    assert status == 0
    assert (tmp_path / "save.txt").read_text(encoding="utf-8") == "Hero -5 20 10\n"

    out = capsys.readouterr().out
    assert "A wild Goblin appeared!" in out
    assert "A wild Skeleton appeared!" in out
    assert "A wild Dragon appeared!" in out
    assert "Monster: Dragon, HP: 150, Attack: 30, Defense: 15" in out
    assert "Inventory: Health Potion" in out
    assert "Goblin's attack has no effect!" in out
    assert "Name: Hero, HP: 100, Attack: 20, Defense: 10, Level: 1, Experience: 50" in out
    assert "Name: Hero, HP: 75, Attack: 20, Defense: 10, Level: 2, Experience: 0" in out
    assert "Hero has died!" in out
    assert f"Game saved to {config.save_path}" in out
    assert f"Game loaded from {config.save_path}" in out
    assert out.rstrip().endswith("Name: Hero, HP: -5, Attack: 20, Defense: 10, Level: 1, Experience: 0")


def test_event_log_records_combat_lines_in_order(tmp_path: Path) -> None:
    config = _config(tmp_path)

    app.run_session(config)

    lines = (tmp_path / "game_log.txt").read_text(encoding="utf-8").splitlines()
    assert lines[:3] == [
        "Hero attacks Goblin for 15 damage!",
        "Goblin's attack has no effect!",
        "Hero attacks Goblin for 15 damage!",
    ]
    assert "Hero leveled up to level 2!" in lines
    assert lines.index("Goblin has been defeated!") < lines.index("Skeleton has been defeated!")
    assert lines[-2:] == ["Hero has died!", "Defeated by Dragon after 4 round(s)."]
    assert not any("appeared" in line for line in lines)


def test_event_log_is_appended_between_sessions(tmp_path: Path) -> None:
    config = _config(tmp_path)

    app.run_session(config)
    first = (tmp_path / "game_log.txt").read_text(encoding="utf-8").splitlines()
    app.run_session(config)
    second = (tmp_path / "game_log.txt").read_text(encoding="utf-8").splitlines()

    assert len(second) == 2 * len(first)


def test_log_open_failure_aborts_startup(tmp_path: Path, capsys) -> None:
    config = _config(tmp_path, log_path=tmp_path / "missing" / "game_log.txt")

    status = app.run_session(config)

    assert status == 1
    captured = capsys.readouterr()
    assert "Failed to open log file" in captured.err
    assert "A wild Goblin appeared!" not in captured.out
    assert not (tmp_path / "save.txt").exists()


def test_save_failure_is_reported_and_session_continues(tmp_path: Path, capsys) -> None:
    config = _config(tmp_path, player_name="Sir Hero")

    status = app.run_session(config)

    assert status == 0
    captured = capsys.readouterr()
    assert "cannot contain whitespace" in captured.err
    # Nothing was saved, so the load step fails too without touching the player.
    assert "Failed to load game" in captured.err
    assert "Name: Sir Hero, HP: -5, Attack: 20, Defense: 10, Level: 2, Experience: 0" in captured.out


def test_load_failure_keeps_in_memory_player(tmp_path: Path, monkeypatch, capsys) -> None:
    config = _config(tmp_path)

    def _fail_write(self, text: str) -> None:
        raise SaveWriteError("disk full")

    monkeypatch.setattr(app.SaveFileStore, "write", _fail_write)
    (tmp_path / "save.txt").write_text("garbage", encoding="utf-8")

    status = app.run_session(config)

    assert status == 0
    err = capsys.readouterr().err
    assert "disk full" in err
    assert "must contain 4 fields" in err


def test_round_cap_from_config_is_applied(tmp_path: Path) -> None:
    config = _config(tmp_path, max_rounds=2)

    app.run_session(config)

    lines = (tmp_path / "game_log.txt").read_text(encoding="utf-8").splitlines()
    assert "The battle against Goblin ends in a stalemate after 2 round(s)." in lines


def test_main_uses_config_and_returns_status(tmp_path: Path, monkeypatch) -> None:
    config = _config(tmp_path)
    monkeypatch.setattr(app, "load_config", lambda: config)

    assert app.main() == 0
    assert (tmp_path / "save.txt").exists()


def test_missing_definitions_are_reported(tmp_path: Path, capsys) -> None:
    config = _config(tmp_path)

    status = app.run_session(config, definitions_path=tmp_path / "nope")

    assert status == 1
    captured = capsys.readouterr()
    assert "Error: Definition file not found" in captured.err
    assert "A wild Goblin appeared!" not in captured.out
    assert not (tmp_path / "save.txt").exists()


class _FullDiskHandle:
    def write(self, text: str) -> int:
        raise OSError("disk full")

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


def test_event_log_write_failure_is_reported(tmp_path: Path, monkeypatch, capsys) -> None:
    config = _config(tmp_path)

    def _open_full_disk(self):
        self._handle = _FullDiskHandle()
        return self

    monkeypatch.setattr(app.EventLog, "open", _open_full_disk)

    status = app.run_session(config)

    assert status == 1
    err = capsys.readouterr().err
    assert "Failed to write to log file" in err
    assert "disk full" in err
    assert not (tmp_path / "save.txt").exists()


def test_save_failure_is_reported_once(tmp_path: Path, capsys) -> None:
    config = _config(tmp_path, player_name="Sir Hero")

    app.run_session(config)

    err_lines = capsys.readouterr().err.splitlines()
    assert len([line for line in err_lines if "cannot contain whitespace" in line]) == 1
