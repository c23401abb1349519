"""SSH command line construction."""

from __future__ import annotations
import json
import shlex
from typing import List, Optional, Sequence

from scw_connect.config.schema import ExecSettings, SSH_USER


def quote_remote_command(command: Sequence[str]) -> str:
    """Join command tokens and wrap them in double quotes as one token.

    Backslashes, double quotes and control characters are escaped; shell
    expansion ($VAR, backticks) still happens on the remote side.

    Examples:
        >>> quote_remote_command(['echo', 'hi'])
        '"echo hi"'
    """
    return json.dumps(' '.join(command), ensure_ascii=False)


def format_command_line(argv: Sequence[str]) -> str:
    """Render argv as a copy/paste-able shell command line.

    Examples:
        >>> format_command_line(['ssh', '-o', 'ProxyCommand=ssh -W %h:%p gw'])
        "ssh -o 'ProxyCommand=ssh -W %h:%p gw'"
    """
    return shlex.join(argv)


def build_ssh_args(
    public_addr: str,
    private_addr: str,
    allocate_tty: bool,
    extra_options: Optional[Sequence[str]],
    remote_command: Optional[Sequence[str]],
    gateway_addr: str,
    settings: Optional[ExecSettings] = None,
) -> List[str]:
    """Build the arguments of an ssh invocation (without 'ssh' itself).

    When a gateway is given the target is the private address, reached
    through a nested 'ssh -W %h:%p <gateway>' used as ProxyCommand.

    Args:
        public_addr: Address used when there is no gateway.
        private_addr: Address used behind the gateway.
        allocate_tty: Force pseudo-terminal allocation (-t -t).
        extra_options: Raw ssh options, passed as a single token.
        remote_command: Command run through '/bin/sh -e -c' remotely.
        gateway_addr: Jump host address, or '' for a direct connection.
        settings: Flags to apply (default: read from environment).

    Returns:
        Ordered list of ssh arguments.
    """
    if settings is None:
        settings = ExecSettings.from_env()

    args: List[str] = []

    if not settings.debug:
        args.append('-q')

    if not settings.secure:
        args.extend([
            '-o', 'UserKnownHostsFile=/dev/null',
            '-o', 'StrictHostKeyChecking=no',
        ])

    if extra_options:
        args.append(' '.join(extra_options))

    args.extend(['-l', SSH_USER])

    if gateway_addr:
        proxy_args = build_ssh_args(
            gateway_addr, '', allocate_tty, ['-W', '%h:%p'], None, '',
            settings=settings,
        )
        args.extend([
            private_addr,
            '-o', 'ProxyCommand=ssh ' + ' '.join(proxy_args),
        ])
    else:
        args.append(public_addr)

    if allocate_tty:
        args.extend(['-t', '-t'])

    if remote_command:
        args.extend(['--', '/bin/sh', '-e'])
        if settings.debug:
            args.append('-x')
        args.append('-c')
        args.append(quote_remote_command(remote_command))

    return args
