"""Abstract base classes for scw-connect services."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


class SSHServiceInterface(ABC):
    """Interface for building and running ssh sessions to a server."""

    @abstractmethod
    def build_command(
        self,
        public_addr: str,
        private_addr: str,
        command: Optional[Sequence[str]] = None,
        gateway_addr: str = '',
        allocate_tty: bool = True,
        extra_options: Optional[Sequence[str]] = None,
    ) -> List[str]:
        """Build the full ssh command, starting with 'ssh'.

        Args:
            public_addr: Server public address.
            private_addr: Server private address.
            command: Remote command tokens (optional).
            gateway_addr: Jump host address, or '' for none.
            allocate_tty: Force pseudo-terminal allocation.
            extra_options: Raw ssh options.

        Returns:
            Command as a list of arguments.
        """
        pass

    @abstractmethod
    def exec_ssh(
        self,
        public_addr: str,
        private_addr: str,
        command: Optional[Sequence[str]] = None,
        check_connection: bool = False,
        gateway_addr: str = '',
    ) -> None:
        """Run ssh attached to the current terminal.

        Args:
            public_addr: Server public address.
            private_addr: Server private address.
            command: Remote command tokens (optional).
            check_connection: Probe port 22 before connecting.
            gateway_addr: Jump host address, or '' for none.
        """
        pass


class SerialConsoleServiceInterface(ABC):
    """Interface for attaching to a server serial console."""

    @abstractmethod
    def build_url(self, server_id: str, api_token: str) -> str:
        """Build the websocket terminal URL for a server.

        Args:
            server_id: Server identifier.
            api_token: API token used to authenticate.

        Returns:
            HTTPS URL.
        """
        pass

    @abstractmethod
    def attach(self, server_id: str, api_token: str, attach_stdin: bool = True) -> None:
        """Attach the current terminal to the server serial console.

        Args:
            server_id: Server identifier.
            api_token: API token used to authenticate.
            attach_stdin: Forward keyboard input to the console.
        """
        pass
