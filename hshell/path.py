"""Locating commands on the PATH."""

from __future__ import annotations

import os
import stat

__all__ = ["is_command", "find_path"]


def is_command(path: str | None) -> bool:
    """True if ``path`` exists and its mode carries the regular-file bit."""
    if not path:
        return False
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return False
    return bool(mode & stat.S_IFREG)


def find_path(pathstr: str | None, cmd: str) -> str | None:
    """Find ``cmd`` in the colon-separated ``pathstr``; an empty entry means the cwd.

    A command written as ``./name`` is returned as is when it exists.
    """
    if not pathstr:
        return None
    if len(cmd) > 2 and cmd.startswith("./") and is_command(cmd):
        return cmd
    for directory in pathstr.split(":"):
        candidate = f"{directory}/{cmd}" if directory else cmd
        if is_command(candidate):
            return candidate
    return None