"""Locate the alphabetic.toml that applies to an invocation.

Lookup order: the ``--config`` path, then ``ALPHABETIC_CONFIG``, then the
nearest ``alphabetic.toml`` in the starting directory or any ancestor.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "alphabetic.toml"
CONFIG_ENV_VAR = "ALPHABETIC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any.

    A set ``ALPHABETIC_CONFIG`` wins outright; pointing it at a missing
    file disables the walk-up instead of falling back to it.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | Path | None, start: Path | None = None) -> Path | None:
    """Pick the TOML file for a run: *explicit* if given, otherwise discover one.

    A missing *explicit* file yields None, so the run uses defaults.
    """
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    return find_config(start)
