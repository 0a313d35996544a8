"""Locate executables the way a shell does, through PATH."""

from __future__ import annotations

import os
from collections.abc import Mapping


def get_path(env: Mapping[str, str]) -> str | None:
    """Return the PATH value from an environment, or None when unset."""
    return env.get("PATH")


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def find_path(name: str, env: Mapping[str, str]) -> str | None:
    """Return the path that would be run for ``name``, or None.

    Names starting with ``/`` or ``.`` are used as given; others are looked
    up in each PATH directory in turn.
    """
    if name.startswith(("/", ".")):
        return name if _is_executable(name) else None
    search = get_path(env)
    if search is None:
        return None
    for directory in filter(None, search.split(":")):
        candidate = f"{directory}/{name}"
        if _is_executable(candidate):
            return candidate
    return None