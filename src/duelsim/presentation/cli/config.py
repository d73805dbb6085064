"""CLI configuration helpers."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from duelsim.services.battle_service import DEFAULT_MAX_ROUNDS

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SessionConfig:
    """Settings for one scripted session; defaults reproduce the fixed script."""

    log_path: Path = Path("game_log.txt")
    save_path: Path = Path("save.txt")
    player_name: str = "Hero"
    max_rounds: int = DEFAULT_MAX_ROUNDS
    debug: bool = False


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    return Path.home() / ".config" / "duelsim"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def load_config(path: Path | None = None) -> SessionConfig:
    """Load config from disk or return defaults.

    Unknown keys are ignored and each invalid value falls back to its default.
    """
    config_path = path or get_default_config_path()
    defaults = SessionConfig()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return defaults
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return defaults
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_path)
        return defaults
    return SessionConfig(
        log_path=_coerce_path(raw.get("log_path"), defaults.log_path),
        save_path=_coerce_path(raw.get("save_path"), defaults.save_path),
        player_name=_coerce_name(raw.get("player_name"), defaults.player_name),
        max_rounds=_coerce_max_rounds(raw.get("max_rounds"), defaults.max_rounds),
        debug=raw.get("debug") is True,
    )


def _coerce_path(value: object, default: Path) -> Path:
    if isinstance(value, str) and value.strip():
        return Path(value)
    return default


def _coerce_name(value: object, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _coerce_max_rounds(value: object, default: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return default
