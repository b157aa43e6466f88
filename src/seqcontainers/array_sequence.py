from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Optional, TypeVar

from .bounds import check_index, check_mod_count, check_range
from .errors import InvalidArgument
from .hashing import polynomial_hash

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class ArraySequence(Generic[T]):
    """Ordered sequence backed by one contiguous, growable buffer.

    Slots ``[0, size)`` hold elements; ``[size, capacity)`` are unused and kept
    at ``None``. The buffer doubles (with a floor of ``DEFAULT_CAPACITY``)
    whenever it is full and is never shrunk.
    """

    __slots__ = ("_data", "_size", "_mod_count")

    def __init__(self, capacity: Optional[int] = None):
        if capacity is None:
            capacity = DEFAULT_CAPACITY
        elif capacity < 0:
            raise InvalidArgument(f"capacity cannot be < 0 : {capacity}")
        self._data: list[Optional[T]] = [None] * capacity
        self._size = 0
        self._mod_count = 0

    @classmethod
    def from_iterable(cls, source: Optional[Iterable[T]]) -> "ArraySequence[T]":
        if source is None:
            return cls()
        items = list(source)
        if not items:
            return cls()
        seq = cls(len(items))
        seq.add_all(items)
        return seq

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def mod_count(self) -> int:
        return self._mod_count

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def _grow(self) -> None:
        old_capacity = len(self._data)
        new_capacity = DEFAULT_CAPACITY if old_capacity < DEFAULT_CAPACITY else old_capacity * 2
        new_data: list[Optional[T]] = [None] * new_capacity
        new_data[:old_capacity] = self._data
        self._data = new_data
        logger.debug("grew buffer %d -> %d (size %d)", old_capacity, new_capacity, self._size)

    def get(self, index: int) -> T:
        check_index(index, self._size)
        return self._data[index]  # type: ignore[return-value]

    def set(self, index: int, value: T) -> T:
        check_index(index, self._size)
        old = self._data[index]
        self._data[index] = value
        return old  # type: ignore[return-value]

    def add(self, value: T) -> bool:
        if len(self._data) <= self._size:
            self._grow()
        self._data[self._size] = value
        self._size += 1
        self._mod_count += 1
        return True

    def insert(self, index: int, value: T) -> None:
        check_index(index, self._size)
        if len(self._data) <= self._size:
            self._grow()
        data = self._data
        data[index + 1:self._size + 1] = data[index:self._size]
        data[index] = value
        self._size += 1
        self._mod_count += 1

    def remove(self, index: int) -> T:
        check_index(index, self._size)
        data = self._data
        old = data[index]
        data[index:self._size - 1] = data[index + 1:self._size]
        self._size -= 1
        data[self._size] = None
        self._mod_count += 1
        return old  # type: ignore[return-value]

    def add_all(self, values: Iterable[T]) -> bool:
        modified = False
        for v in values:
            self.add(v)
            modified = True
        return modified

    def sub_list(self, from_index: int, to_index: int) -> "ArraySequence[T]":
        check_range(from_index, to_index, self._size)
        logger.debug("sub_list [%d, %d) of %d", from_index, to_index, self._size)
        return type(self).from_iterable(self._data[from_index:to_index])

    def to_list(self) -> list[T]:
        return self._data[:self._size]  # type: ignore[return-value]

    def __eq__(self, other: Any) -> bool:
        expected = self._mod_count
        if self is other:
            return True
        if not isinstance(other, ArraySequence):
            return NotImplemented
        result = self._size == other._size
        if result:
            for i in range(self._size):
                if not self._data[i] == other._data[i]:
                    result = False
                    break
        check_mod_count(self, expected)
        return result

    def __hash__(self) -> int:
        expected = self._mod_count
        h = polynomial_hash(self._data[i] for i in range(self._size))
        check_mod_count(self, expected)
        return h

    def __str__(self) -> str:
        if self._size == 0:
            return "[]"
        return "[" + ", ".join(str(self._data[i]) for i in range(self._size)) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
