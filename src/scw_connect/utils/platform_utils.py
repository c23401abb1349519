"""Environment-based home directory lookup."""

from __future__ import annotations
import os
from pathlib import Path

from scw_connect.errors import HomeNotFoundError


def resolve_home_dir() -> Path:
    """Get user's home directory from the environment.

    Checks HOME (Unix) then USERPROFILE (Windows).

    Returns:
        Path to home directory.

    Raises:
        HomeNotFoundError: If neither variable is set.
    """
    home = os.environ.get('HOME', '')
    if not home:
        home = os.environ.get('USERPROFILE', '')
    if not home:
        raise HomeNotFoundError()
    return Path(home)
