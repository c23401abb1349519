"""SSH service for connecting to servers, directly or through a gateway."""

from __future__ import annotations
import logging
import subprocess
from typing import List, Optional, Sequence

from scw_connect.config.schema import ExecSettings, SSH_PORT
from scw_connect.errors import MissingAddressError, NotReachableError
from scw_connect.services.interfaces import SSHServiceInterface
from scw_connect.utils.net_utils import is_port_open
from scw_connect.utils.ssh_utils import build_ssh_args, format_command_line

logger = logging.getLogger(__name__)


class SSHService(SSHServiceInterface):
    """SSH service running the system ssh client with inherited streams.

    Servers without a public address are reached through a gateway,
    using their private address as target.
    """

    def __init__(self, settings: Optional[ExecSettings] = None) -> None:
        """Initialize SSH service.

        Args:
            settings: Fixed ssh flags. When None, DEBUG and exec_secure
                are read from the environment on every call.
        """
        self._settings = settings

    def build_command(
        self,
        public_addr: str,
        private_addr: str,
        command: Optional[Sequence[str]] = None,
        gateway_addr: str = '',
        allocate_tty: bool = True,
        extra_options: Optional[Sequence[str]] = None,
    ) -> List[str]:
        args = build_ssh_args(
            public_addr,
            private_addr,
            allocate_tty,
            extra_options,
            command,
            gateway_addr,
            settings=self._settings,
        )
        return ['ssh'] + args

    @staticmethod
    def check_route(public_addr: str, private_addr: str, gateway_addr: str) -> None:
        """Make sure the server can be addressed at all.

        Raises:
            MissingAddressError: If there is neither a public address nor a
                gateway, or a gateway without a private address.
        """
        if not public_addr and not gateway_addr:
            raise MissingAddressError("server does not have public IP")
        if not private_addr and gateway_addr:
            raise MissingAddressError("server does not have private IP")

    @staticmethod
    def check_reachable(public_addr: str, gateway_addr: str = '') -> None:
        """Probe the ssh port of the gateway, or of the server itself.

        Raises:
            NotReachableError: If the probed port is closed.
        """
        if gateway_addr:
            logger.info("Checking gateway %s", gateway_addr)
            if not is_port_open(f"{gateway_addr}:{SSH_PORT}"):
                raise NotReachableError("gateway is not available, try again later")
        else:
            logger.info("Checking server %s", public_addr)
            if not is_port_open(f"{public_addr}:{SSH_PORT}"):
                raise NotReachableError("server is not ready, try again later")

    def exec_ssh(
        self,
        public_addr: str,
        private_addr: str,
        command: Optional[Sequence[str]] = None,
        check_connection: bool = False,
        gateway_addr: str = '',
    ) -> None:
        """Run ssh against a server and wait for it to exit.

        The child shares stdin, stdout and stderr with this process, so
        interactive sessions work as usual.

        Args:
            public_addr: Server public address.
            private_addr: Server private address.
            command: Remote command tokens; None opens a shell.
            check_connection: Probe port 22 before connecting.
            gateway_addr: Jump host address, or '' for none.

        Raises:
            MissingAddressError: If the server cannot be addressed.
            NotReachableError: If the connection check failed.
            subprocess.CalledProcessError: If ssh exited with non-zero status.
            FileNotFoundError: If ssh is not installed.
        """
        self.check_route(public_addr, private_addr, gateway_addr)

        if check_connection:
            self.check_reachable(public_addr, gateway_addr)

        ssh_command = self.build_command(
            public_addr,
            private_addr,
            command,
            gateway_addr,
            allocate_tty=True,
        )
        logger.debug("Executing: %s", format_command_line(ssh_command))
        subprocess.run(ssh_command, check=True)


def exec_ssh(
    public_addr: str,
    private_addr: str,
    command: Optional[Sequence[str]] = None,
    check_connection: bool = False,
    gateway_addr: str = '',
) -> None:
    """Run ssh against a server using flags from the environment.

    See SSHService.exec_ssh.
    """
    SSHService().exec_ssh(
        public_addr, private_addr, command, check_connection, gateway_addr
    )
