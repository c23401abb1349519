"""Unix path and list helpers."""

from __future__ import annotations
import posixpath
from typing import Iterable, List, Tuple


def split_unix_path(full_path: str) -> Tuple[str, str]:
    """Split a Unix path into its directory and last element.

    Trailing slashes are ignored. Forward-slash semantics are used on
    every platform, which is what tar archives expect.

    Args:
        full_path: Path to split.

    Returns:
        (directory, base) tuple. Empty parts are reported as '.'.

    Examples:
        >>> split_unix_path('/a/b/c/')
        ('/a/b', 'c')
        >>> split_unix_path('c')
        ('.', 'c')
    """
    full_path = full_path.rstrip('/')
    directory, base = posixpath.split(full_path)
    directory = posixpath.normpath(directory) if directory else '.'
    # normpath keeps a leading '//'
    if directory.startswith('//'):
        directory = '/' + directory.lstrip('/')
    return directory, base or '.'


def deduplicate(items: Iterable[str]) -> List[str]:
    """Return the distinct values of items, in no particular order."""
    return list(set(items))
