"""Exceptions raised by scw-connect helpers."""

from __future__ import annotations


class ScwConnectError(Exception):
    """Base class for all scw-connect errors."""


class MissingAddressError(ScwConnectError):
    """The server has no address usable to reach it."""


class NotReachableError(ScwConnectError):
    """A TCP probe of the server or its gateway failed."""


class HomeNotFoundError(ScwConnectError):
    """Neither HOME nor USERPROFILE is set."""

    def __init__(self, message: str = "user home directory not found") -> None:
        super().__init__(message)
