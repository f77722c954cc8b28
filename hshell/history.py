"""Command history kept in memory and persisted to a file in the home directory."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["HIST_FILE", "HIST_MAX", "History", "history_file"]

HIST_FILE = ".simple_shell_history"
HIST_MAX = 4096


def history_file(home: str | None) -> str | None:
    """Return the history file path inside ``home``, or None when there is no home."""
    if not home:
        return None
    return f"{home}/{HIST_FILE}"


class History:
    """An ordered list of entered command lines, numbered from 0."""

    def __init__(self, max_entries: int = HIST_MAX) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._lines: list[str] = []

    def add(self, line: str) -> None:
        """Append a command line."""
        self._lines.append(line)

    def load(self, path: str | os.PathLike[str]) -> int:
        """Append the lines stored in ``path`` and return the resulting entry count.

        A missing, unreadable or nearly empty (under two bytes) file loads nothing
        and returns 0. When the file fills the history, only the newest
        ``max_entries - 1`` entries are kept.
        """
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError:
            return 0
        if len(data) < 2:
            return 0
        lines = data.decode("utf-8", errors="replace").split("\n")
        if lines[-1] == "":
            lines.pop()
        self._lines.extend(lines)
        if len(self._lines) >= self.max_entries:
            del self._lines[: len(self._lines) - self.max_entries + 1]
        return len(self._lines)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write every entry to ``path``, one per line, replacing its contents."""
        fd = os.open(path, os.O_CREAT | os.O_TRUNC | os.O_WRONLY, 0o644)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            for line in self._lines:
                handle.write(line + "\n")

    def format(self) -> str:
        """Render the history as ``N: line`` rows, as the history builtin prints it."""
        return "".join(f"{number}: {line}\n" for number, line in enumerate(self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))