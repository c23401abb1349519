"""Settings and path resolution for scw-connect."""

from __future__ import annotations

from .paths import resolve_config_path
from .schema import ExecSettings, SerialConsoleSettings, CONFIG_FILENAME

__all__ = [
    'resolve_config_path',
    'ExecSettings',
    'SerialConsoleSettings',
    'CONFIG_FILENAME',
]
