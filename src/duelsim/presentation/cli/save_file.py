"""File-system helpers for save file storage."""
from __future__ import annotations

from pathlib import Path

from duelsim.services.errors import SaveReadError, SaveWriteError


class SaveFileStore:
    """Reads and writes the single save file on disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str:
        """Return the raw save text."""
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SaveReadError(f"Failed to load game: {self._path} does not exist.") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SaveReadError(f"Failed to load game from {self._path}: {exc}") from exc

    def write(self, text: str) -> None:
        """Replace the save file contents with ``text``."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise SaveWriteError(f"Failed to save game to {self._path}: {exc}") from exc
