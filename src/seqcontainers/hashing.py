from __future__ import annotations

from typing import Any, Iterable

HASH_MULTIPLIER = 31
HASH_SEED = 1

_MASK = 0xFFFFFFFF


def wrap32(value: int) -> int:
    """Fold an arbitrary int into the signed 32-bit range."""
    value &= _MASK
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def element_hash(value: Any) -> int:
    return 0 if value is None else wrap32(hash(value))


def polynomial_hash(values: Iterable[Any]) -> int:
    h = HASH_SEED
    for v in values:
        h = wrap32(HASH_MULTIPLIER * h + element_hash(v))
    return h


def single_hash(value: Any) -> int:
    # hash of a one-element polynomial: HASH_MULTIPLIER * HASH_SEED + hash(value)
    return polynomial_hash((value,))
