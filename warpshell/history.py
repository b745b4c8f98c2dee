"""Persistent record of the most recent commands."""

from __future__ import annotations

from pathlib import Path

EMPTY_MARKER = " "
DEFAULT_LIMIT = 15


class HistoryError(Exception):
    """Raised when a requested history entry does not exist."""


class History:
    """Commands stored one per line in a file, newest last."""

    def __init__(self, path: str | Path, limit: int = DEFAULT_LIMIT) -> None:
        self.path = Path(path)
        self.limit = limit

    def _ensure_file(self) -> None:
        if not self.path.exists():
            self.path.write_text(EMPTY_MARKER)

    def _write(self, entries: list[str]) -> None:
        self.path.write_text("".join(f"{entry}\n" for entry in entries))

    def entries(self) -> list[str]:
        """Return stored commands, oldest first."""
        self._ensure_file()
        text = self.path.read_text()
        if text in ("", EMPTY_MARKER):
            return []
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def add(self, command: str) -> None:
        """Record ``command`` unless it repeats the newest entry."""
        line = next((part for part in command.split("\n") if part), "")
        entries = self.entries()
        if entries and entries[-1] == line:
            return
        entries.append(line)
        self._write(entries[-self.limit:])

    def purge(self) -> None:
        """Forget every stored command."""
        self.path.write_text(EMPTY_MARKER)

    def render(self) -> str:
        """Return the stored commands as printed by ``pastevents``."""
        return "".join(f"{entry}\n" for entry in self.entries())

    def get(self, index: int) -> str:
        """Return the command ``index`` places back, 1 being the newest."""
        entries = self.entries()
        if not entries:
            raise HistoryError("No instruction in record")
        if index < 1 or index > len(entries):
            raise HistoryError("Insufficient Number Of Instructions")
        return entries[-index]