"""An ordered, editable copy of the process environment."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .text import starts_with

__all__ = ["Environment"]


class Environment:
    """Environment variables kept as ordered ``NAME=value`` entries."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)
        self.changed = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> Environment:
        """Build an environment from a name-to-value mapping, keeping its order."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def _matches(self, entry: str, name: str) -> bool:
        rest = starts_with(entry, name)
        return rest is not None and rest.startswith("=")

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None if it is unset or empty."""
        prefix = name + "="
        for entry in self._entries:
            rest = starts_with(entry, prefix)
            if rest:
                return rest
        return None

    def set(self, name: str, value: str) -> None:
        """Set ``name`` to ``value``, replacing the first existing entry in place."""
        entry = f"{name}={value}"
        for index, existing in enumerate(self._entries):
            if self._matches(existing, name):
                self._entries[index] = entry
                break
        else:
            self._entries.append(entry)
        self.changed = True

    def unset(self, name: str) -> bool:
        """Remove every entry for ``name``; return True if any was removed."""
        kept = [entry for entry in self._entries if not self._matches(entry, name)]
        removed = len(kept) != len(self._entries)
        if removed:
            self._entries = kept
            self.changed = True
        return removed

    def to_strings(self) -> list[str]:
        """Return a copy of the entries as ``NAME=value`` strings."""
        self.changed = False
        return list(self._entries)

    def to_dict(self) -> dict[str, str]:
        """Return the entries as a dict; the first entry for a name wins."""
        result: dict[str, str] = {}
        for entry in self._entries:
            name, sep, value = entry.partition("=")
            if sep and name not in result:
                result[name] = value
        return result

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)