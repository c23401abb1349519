"""TCP reachability probes."""

from __future__ import annotations
import logging
import socket
import time
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_SECONDS = 2.0
POLL_INTERVAL_SECONDS = 1.0


def split_host_port(host_port: str) -> Tuple[str, int]:
    """Split 'host:port' or '[v6addr]:port' into its parts.

    Args:
        host_port: Address with port.

    Returns:
        (host, port) tuple.

    Raises:
        ValueError: If the port is missing or not a number.

    Examples:
        >>> split_host_port('10.0.0.1:22')
        ('10.0.0.1', 22)
        >>> split_host_port('[::1]:2222')
        ('::1', 2222)
    """
    host, sep, port = host_port.rpartition(':')
    if not sep or not port:
        raise ValueError(f"missing port in address: {host_port!r}")
    if host.startswith('[') and host.endswith(']'):
        host = host[1:-1]
    return host, int(port)


def is_port_open(host_port: str) -> bool:
    """Check whether a TCP connection to 'host:port' can be opened.

    The connection is closed right away. Any failure, including a
    malformed address, counts as closed.

    Args:
        host_port: Address with port, e.g. '10.0.0.1:22'.

    Returns:
        True if the connection succeeded within the timeout.
    """
    try:
        address = split_host_port(host_port)
        with socket.create_connection(address, timeout=CONNECT_TIMEOUT_SECONDS):
            return True
    except (OSError, ValueError) as e:
        logger.debug("TCP probe of %s failed: %s", host_port, e)
        return False


def wait_for_port_open(
    host_port: str,
    interval: float = POLL_INTERVAL_SECONDS,
    timeout: Optional[float] = None,
) -> bool:
    """Block until 'host:port' accepts TCP connections.

    Without a timeout this waits forever.

    Args:
        host_port: Address with port.
        interval: Seconds to sleep between probes.
        timeout: Give up after this many seconds (default: never).

    Returns:
        True once the port is open, False if the timeout expired first.
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    logger.info("Waiting for %s to accept connections", host_port)
    while not is_port_open(host_port):
        delay = interval
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.info("Gave up waiting for %s after %ss", host_port, timeout)
                return False
            # last probe lands on the deadline
            delay = min(interval, remaining)
        time.sleep(delay)
    return True
