from __future__ import annotations

import logging
from typing import Any

from .errors import ConcurrentStructuralChange, IndexOutOfRange

logger = logging.getLogger(__name__)


def check_index(index: int, length: int) -> None:
    if index < 0 or index >= length:
        raise IndexOutOfRange(f"Index {index} out of bounds for length {length}")


def check_range(from_index: int, to_index: int, length: int) -> None:
    # order matters: a reversed range is reported before either bound
    if from_index > to_index:
        raise IndexOutOfRange(f"from={from_index}, to={to_index}")
    if from_index < 0:
        raise IndexOutOfRange(f"from={from_index}")
    if to_index > length:
        raise IndexOutOfRange(f"to={to_index}")


def check_mod_count(container: Any, expected: int) -> None:
    current = container.mod_count
    if current != expected:
        logger.warning("structural change during comparison: mod_count %d -> %d", expected, current)
        raise ConcurrentStructuralChange(
            f"{type(container).__name__} modified during computation (mod_count {expected} -> {current})"
        )
