"""Utilities package for scw-connect."""

from __future__ import annotations

from scw_connect.utils.formatting import (
    truncate_if,
    sanitize_token,
)
from scw_connect.utils.path_utils import (
    split_unix_path,
    deduplicate,
)
from scw_connect.utils.platform_utils import resolve_home_dir
from scw_connect.utils.net_utils import (
    is_port_open,
    wait_for_port_open,
)
from scw_connect.utils.ssh_utils import (
    build_ssh_args,
    format_command_line,
)

__all__ = [
    'truncate_if',
    'sanitize_token',
    'split_unix_path',
    'deduplicate',
    'resolve_home_dir',
    'is_port_open',
    'wait_for_port_open',
    'build_ssh_args',
    'format_command_line',
]
