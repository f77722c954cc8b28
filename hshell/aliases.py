"""The alias table behind the alias builtin."""

from __future__ import annotations

from .text import starts_with

__all__ = ["AliasTable", "MAX_EXPANSIONS"]

MAX_EXPANSIONS = 10


class AliasTable:
    """Aliases kept as ordered ``name=value`` entries."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    @staticmethod
    def _split(assignment: str) -> tuple[str, str]:
        name, sep, value = assignment.partition("=")
        if not sep:
            raise ValueError(f"not an alias assignment: {assignment!r}")
        return name, value

    def _find(self, name: str) -> int | None:
        prefix = name + "="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def remove(self, assignment: str) -> bool:
        """Remove the first alias whose entry begins with the name in ``assignment``.

        Matching is by prefix of the whole entry. Returns True if an entry was removed.
        Raises ValueError when ``assignment`` has no '='.
        """
        name, _ = self._split(assignment)
        for index, entry in enumerate(self._entries):
            if starts_with(entry, name) is not None:
                del self._entries[index]
                return True
        return False

    def define(self, assignment: str) -> None:
        """Apply ``name=value``: an empty value removes the alias, otherwise it is (re)set.

        Raises ValueError when ``assignment`` has no '='.
        """
        _, value = self._split(assignment)
        self.remove(assignment)
        if value:
            self._entries.append(assignment)

    def lookup(self, name: str) -> str | None:
        """Return the value of alias ``name``, or None if it is not defined."""
        index = self._find(name)
        if index is None:
            return None
        return self._entries[index].partition("=")[2]

    @staticmethod
    def _format(entry: str) -> str:
        name, _, value = entry.partition("=")
        return f"{name}='{value}'\n"

    def format_entry(self, name: str) -> str:
        """Render alias ``name`` as ``name='value'`` with a newline; KeyError if undefined."""
        index = self._find(name)
        if index is None:
            raise KeyError(name)
        return self._format(self._entries[index])

    def format_all(self) -> str:
        """Render every alias in definition order."""
        return "".join(self._format(entry) for entry in self._entries)

    def expand(self, word: str) -> str:
        """Replace ``word`` by its alias value repeatedly, at most ten times."""
        for _ in range(MAX_EXPANSIONS):
            value = self.lookup(word)
            if value is None:
                break
            word = value
        return word

    def __len__(self) -> int:
        return len(self._entries)