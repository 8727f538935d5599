"""Identifier generation for records created during a session."""

from __future__ import annotations

import random
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def new_id() -> str:
    """Return an opaque id: base-36 millisecond timestamp plus a random suffix.

    Unique within a running session with overwhelming probability; not meant
    to be globally unique.
    """
    stamp = _base36(int(time.time() * 1000))
    suffix = "".join(random.choices(_ALPHABET, k=6))
    return stamp + suffix
