"""Config file location."""

from __future__ import annotations

from pathlib import Path

from scw_connect.config.schema import CONFIG_FILENAME
from scw_connect.utils.platform_utils import resolve_home_dir


def resolve_config_path() -> Path:
    """Get the path to the CLI config file (~/.scwrc).

    Returns:
        Path to the config file (may not exist).

    Raises:
        HomeNotFoundError: If no home directory is set in the environment.
    """
    return resolve_home_dir() / CONFIG_FILENAME
