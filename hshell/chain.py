"""Splitting command lines on ';', '&&' and '||', and variable expansion."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from .text import convert_number, starts_with

__all__ = ["ChainOp", "Command", "split_chain", "should_run", "expand_variables"]


class ChainOp(enum.IntEnum):
    """The operator that joins a command to the one before it."""

    NORM = 0
    OR = 1
    AND = 2
    CHAIN = 3


_SEPARATORS = (("||", ChainOp.OR), ("&&", ChainOp.AND), (";", ChainOp.CHAIN))


@dataclass(frozen=True)
class Command:
    """One command of a chained line and the operator that precedes it."""

    text: str
    op: ChainOp = ChainOp.NORM


def _next_separator(line: str, start: int) -> tuple[int, ChainOp | None, int]:
    for position in range(start, len(line)):
        for token, op in _SEPARATORS:
            if line.startswith(token, position):
                return position, op, len(token)
    return len(line), None, 0


def split_chain(line: str) -> list[Command]:
    """Split ``line`` into commands; nothing follows a trailing separator."""
    commands: list[Command] = []
    op = ChainOp.NORM
    start = 0
    while True:
        end, next_op, width = _next_separator(line, start)
        commands.append(Command(line[start:end], op))
        if next_op is None:
            break
        start = end + width
        op = next_op
        if start >= len(line):
            break
    return commands


def should_run(op: ChainOp, status: int) -> bool:
    """Whether a command joined by ``op`` runs after a previous exit ``status``.

    When this is False the rest of the line is abandoned.
    """
    if op is ChainOp.AND and status != 0:
        return False
    if op is ChainOp.OR and status == 0:
        return False
    return True


def _lookup(env: Iterable[str], name: str) -> str | None:
    prefix = name + "="
    for entry in env:
        rest = starts_with(entry, prefix)
        if rest is not None:
            return rest
    return None


def expand_variables(
    argv: list[str], status: int, pid: int, env: Iterable[str]
) -> list[str]:
    """Return ``argv`` with whole-word ``$?``, ``$$`` and ``$NAME`` replaced.

    ``env`` yields ``NAME=value`` entries; unknown names expand to the empty string.
    """
    entries = list(env)
    result: list[str] = []
    for word in argv:
        if not word.startswith("$") or len(word) < 2:
            result.append(word)
        elif word == "$?":
            result.append(convert_number(status, 10))
        elif word == "$$":
            result.append(convert_number(pid, 10))
        else:
            value = _lookup(entries, word[1:])
            result.append("" if value is None else value)
    return result