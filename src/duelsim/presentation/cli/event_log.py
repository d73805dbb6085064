"""Append-only text log of combat events."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable

from duelsim.services.errors import EventLogError


class EventLog:
    """Keeps the log file open in append mode for the lifetime of a session."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._handle: IO[str] | None = None

    def open(self) -> "EventLog":
        """Open the log for appending; raise EventLogError when that fails."""
        if self._handle is not None:
            return self
        try:
            self._handle = self._path.open("a", encoding="utf-8")
        except OSError as exc:
            raise EventLogError(f"Failed to open log file {self._path}: {exc}") from exc
        return self

    def write(self, line: str) -> None:
        """Append a single newline-terminated line."""
        if self._handle is None:
            raise EventLogError("Event log is not open.")
        try:
            self._handle.write(f"{line}\n")
            self._handle.flush()
        except OSError as exc:
            raise EventLogError(f"Failed to write to log file {self._path}: {exc}") from exc

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "EventLog":
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()
