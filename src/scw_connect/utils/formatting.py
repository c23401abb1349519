"""String helpers for names and labels."""

from __future__ import annotations
import re

_NON_WORD_RE = re.compile(r'[^a-zA-Z0-9-]')
_UNDERSCORES_RE = re.compile(r'__+')


def truncate_if(s: str, max_len: int, cond: bool) -> str:
    """Cut a string to max_len bytes when cond is true.

    Length is measured in UTF-8 bytes. A character split by the cut is
    dropped, so the result may be shorter than max_len bytes.

    Args:
        s: String to truncate.
        max_len: Maximum length in bytes.
        cond: Only truncate when True.

    Returns:
        Truncated string, or s unchanged.

    Raises:
        ValueError: If max_len is negative.

    Examples:
        >>> truncate_if('abcdef', 3, True)
        'abc'
        >>> truncate_if('abcdef', 3, False)
        'abcdef'
    """
    if max_len < 0:
        raise ValueError(f"max_len must be >= 0, got {max_len}")
    if not cond:
        return s
    encoded = s.encode('utf-8')
    if len(encoded) <= max_len:
        return s
    return encoded[:max_len].decode('utf-8', errors='ignore')


def sanitize_token(s: str) -> str:
    """Turn an arbitrary name into a single word without shell specials.

    Args:
        s: Input string.

    Returns:
        String made of [a-zA-Z0-9-_] with no leading, trailing or
        repeated underscores.

    Examples:
        >>> sanitize_token('Hello, World!!')
        'Hello_World'
        >>> sanitize_token('___a___')
        'a'
    """
    s = _NON_WORD_RE.sub('_', s)
    s = _UNDERSCORES_RE.sub('_', s)
    return s.strip('_')
