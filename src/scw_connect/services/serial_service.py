"""Serial console access through the term.js websocket bridge."""

from __future__ import annotations
import logging
import subprocess
from typing import List, Optional
from urllib.parse import urlencode

from scw_connect.config.schema import SerialConsoleSettings
from scw_connect.services.interfaces import SerialConsoleServiceInterface

logger = logging.getLogger(__name__)

_INSTALL_HELP = """
You need to install '%s' from %s

    %s

However, you can access your serial using a web browser:

    %s
"""


class SerialConsoleService(SerialConsoleServiceInterface):
    """Attach to a server serial console with termjs-cli."""

    def __init__(self, settings: Optional[SerialConsoleSettings] = None) -> None:
        self._settings = settings or SerialConsoleSettings()

    def build_url(self, server_id: str, api_token: str) -> str:
        query = urlencode([
            ('server_id', server_id),
            ('type', 'serial'),
            ('auth_token', api_token),
        ])
        return f"{self._settings.tty_url}?{query}"

    def build_command(self, url: str, attach_stdin: bool = True) -> List[str]:
        """Build the bridge command line for a console URL."""
        cmd = [self._settings.termjs_bin]
        if not attach_stdin:
            cmd.append('--no-stdin')
        cmd.append(url)
        return cmd

    def attach(self, server_id: str, api_token: str, attach_stdin: bool = True) -> None:
        """Attach the current terminal to the server serial console.

        Blocks until the bridge exits. If it cannot be run or fails,
        install instructions and a browser URL are logged before the
        error is re-raised.

        Raises:
            subprocess.CalledProcessError: If the bridge exited with an error.
            OSError: If the bridge could not be started.
        """
        url = self.build_url(server_id, api_token)
        cmd = self.build_command(url, attach_stdin)
        logger.debug("Executing: %s", cmd)
        try:
            subprocess.run(cmd, check=True)
        except (OSError, subprocess.CalledProcessError):
            logger.warning(
                _INSTALL_HELP,
                self._settings.termjs_bin,
                self._settings.project_url,
                self._settings.install_command,
                url,
            )
            raise


def attach_serial_console(server_id: str, api_token: str, attach_stdin: bool = True) -> None:
    """Attach to a server serial console with default settings."""
    SerialConsoleService().attach(server_id, api_token, attach_stdin)
