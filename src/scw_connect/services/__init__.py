"""Service layer for scw-connect."""

from __future__ import annotations

from scw_connect.services.ssh_service import SSHService, exec_ssh
from scw_connect.services.serial_service import SerialConsoleService, attach_serial_console

__all__ = [
    'SSHService',
    'exec_ssh',
    'SerialConsoleService',
    'attach_serial_console',
]
