"""Lookup of the current user's home directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Protocol

IS_WINDOWS = os.name == "nt"


class HomeDirResolver(Protocol):
    """Returns the current user's home directory, or ``None`` if unknown."""

    def __call__(self) -> Optional[Path]: ...


def _from_env(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    if not value:
        return None
    return Path(value)


def _from_passwd() -> Optional[Path]:
    import pwd

    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError:
        return None
    if not entry.pw_dir:
        return None
    return Path(entry.pw_dir)


def system_home_dir() -> Optional[Path]:
    """Ask the operating system for the current user's home directory.

    On Windows this is ``%USERPROFILE%``. Elsewhere ``$HOME`` is used when
    set and non-empty, falling back to the password database entry for the
    current uid. Nothing is cached.
    """
    if IS_WINDOWS:
        return _from_env("USERPROFILE")
    return _from_env("HOME") or _from_passwd()
