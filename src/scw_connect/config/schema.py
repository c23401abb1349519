"""Settings definitions for SSH and serial console helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Environment flags, enabled only when set to exactly "1"
DEBUG_ENV = 'DEBUG'
SECURE_ENV = 'exec_secure'

CONFIG_FILENAME = '.scwrc'

SSH_PORT = 22
SSH_USER = 'root'


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name) == '1'


@dataclass
class ExecSettings:
    """Flags that shape the ssh command line.

    Attributes:
        debug: Verbose ssh (no -q) and shell tracing (-x) on the remote side.
        secure: Keep ssh host key checking; when False, unknown hosts are
            trusted and nothing is written to known_hosts.
    """
    debug: bool = False
    secure: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ExecSettings':
        """Read settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ).

        Returns:
            ExecSettings instance.
        """
        if environ is None:
            environ = os.environ
        return cls(
            debug=_flag(environ, DEBUG_ENV),
            secure=_flag(environ, SECURE_ENV),
        )


@dataclass
class SerialConsoleSettings:
    """Serial console bridge configuration.

    Attributes:
        tty_url: Base URL of the websocket terminal endpoint.
        termjs_bin: Terminal bridge executable.
        project_url: Where to get the bridge, shown when it fails.
        install_command: Command that installs the bridge.
    """
    tty_url: str = 'https://tty.cloud.online.net'
    termjs_bin: str = 'termjs-cli'
    project_url: str = 'https://github.com/moul/term.js-cli'
    install_command: str = 'npm install -g term.js-cli'
