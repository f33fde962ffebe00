"""Locate a resource directory and make it the working directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path

_MAX_LEVELS_UP = 3


def _application_dir() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent


def search_and_set_resource_dir(
    folder_name: str | os.PathLike[str],
    app_dir: str | os.PathLike[str] | None = None,
) -> bool:
    """Find ``folder_name`` and change into it.

    The working directory is checked first, then ``app_dir`` (by default
    the directory of the running script) and up to three levels above it.
    Returns True if a directory was found, False if nothing was changed.
    """
    base = Path(app_dir) if app_dir is not None else _application_dir()
    candidates = [Path.cwd() / folder_name]
    candidates.extend(
        base.joinpath(*([".."] * levels), folder_name)
        for levels in range(_MAX_LEVELS_UP + 1)
    )
    for candidate in candidates:
        if candidate.is_dir():
            os.chdir(candidate)
            return True
    return False