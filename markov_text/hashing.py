"""Stable string hashing.

Python's built-in ``hash`` for ``str`` is salted per process, so it cannot be
used to turn a textual seed into a reproducible random stream.
"""

from __future__ import annotations

from typing import Optional

_MASK = 0xFFFFFFFF
_MIX = 1566083941


def _to_int32(value: int) -> int:
    value &= _MASK
    return value - 0x100000000 if value & 0x80000000 else value


def stable_hash(text: str, start: int = 0, end: Optional[int] = None) -> int:
    """Return a signed 32-bit hash of ``text[start:end]``.

    Two DJB2 lanes consume alternating characters and are mixed at the end.
    The range arguments let callers hash part of a larger string without
    slicing it.
    """
    if end is None:
        end = len(text)
    hash1 = 5381
    hash2 = hash1
    i = start
    while i < end:
        hash1 = (((hash1 << 5) + hash1) ^ ord(text[i])) & _MASK
        if i + 1 >= end:
            break
        hash2 = (((hash2 << 5) + hash2) ^ ord(text[i + 1])) & _MASK
        i += 2
    return _to_int32(hash1 + hash2 * _MIX)
