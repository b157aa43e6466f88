from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, TypeVar

from .bounds import check_index, check_mod_count, check_range
from .hashing import single_hash, wrap32

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class _Node(Generic[T]):
    value: T
    # forward link owns the successor; prev is navigation only
    next: Optional["_Node[T]"] = None
    prev: Optional["_Node[T]"] = None


class LinkedSequence(Generic[T]):
    """Ordered sequence stored as a chain of doubly-linked nodes."""

    __slots__ = ("_head", "_tail", "_size", "_mod_count")

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        self._mod_count = 0

    @classmethod
    def from_iterable(cls, source: Optional[Iterable[T]]) -> "LinkedSequence[T]":
        seq = cls()
        if source is not None:
            seq.add_all(source)
        return seq

    @property
    def mod_count(self) -> int:
        return self._mod_count

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def add_first(self, value: T) -> None:
        old_head = self._head
        node = _Node(value, next=old_head)
        self._head = node
        if old_head is None:
            self._tail = node
        else:
            old_head.prev = node
        self._size += 1
        self._mod_count += 1

    def add_last(self, value: T) -> None:
        old_tail = self._tail
        node = _Node(value, prev=old_tail)
        self._tail = node
        if old_tail is None:
            self._head = node
        else:
            old_tail.next = node
        self._size += 1
        self._mod_count += 1

    def add(self, value: T) -> bool:
        self.add_last(value)
        return True

    def insert(self, index: int, value: T) -> None:
        check_index(index, self._size)
        successor = self._node_at(index)
        predecessor = successor.prev
        node = _Node(value, next=successor, prev=predecessor)
        if predecessor is None:
            self._head = node
        else:
            predecessor.next = node
        successor.prev = node
        self._size += 1
        self._mod_count += 1

    def get(self, index: int) -> T:
        check_index(index, self._size)
        return self._node_at(index).value

    def set(self, index: int, value: T) -> T:
        check_index(index, self._size)
        node = self._node_at(index)
        old = node.value
        node.value = value
        return old

    def remove(self, index: int) -> T:
        check_index(index, self._size)
        node = self._node_at(index)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        self._mod_count += 1
        return node.value

    def add_all(self, values: Iterable[T]) -> bool:
        modified = False
        for v in values:
            self.add(v)
            modified = True
        return modified

    def sub_list(self, from_index: int, to_index: int) -> "LinkedSequence[T]":
        """Return a new sequence holding the elements in ``[from_index, to_index)``.

        The result gets its own node chain; element objects are shared, not copied.
        """
        check_range(from_index, to_index, self._size)
        logger.debug("sub_list [%d, %d) of %d", from_index, to_index, self._size)
        result: LinkedSequence[T] = type(self)()
        if from_index == to_index:
            return result
        node: Optional[_Node[T]] = self._node_at(from_index)
        for _ in range(to_index - from_index):
            assert node is not None
            result.add_last(node.value)
            node = node.next
        return result

    def to_list(self) -> list[T]:
        out = []
        node = self._head
        while node is not None:
            out.append(node.value)
            node = node.next
        return out

    def __eq__(self, other: Any) -> bool:
        expected = self._mod_count
        if self is other:
            return True
        if not isinstance(other, LinkedSequence):
            return NotImplemented
        result = self._size == other._size
        this_node = self._head
        that_node = other._head
        # no early exit on mismatch: every pair is compared
        while this_node is not None:
            if that_node is None:
                result = False
                break
            result = (this_node.value == that_node.value) and result
            this_node = this_node.next
            that_node = that_node.next
        check_mod_count(self, expected)
        return bool(result)

    def __hash__(self) -> int:
        expected = self._mod_count
        h = single_hash(self._size)
        node = self._head
        while node is not None:
            h = wrap32(h + single_hash(node.value))
            node = node.next
        check_mod_count(self, expected)
        return h

    def __str__(self) -> str:
        if self._size == 0:
            return "[]"
        parts = []
        node = self._head
        while node is not None:
            parts.append(str(node.value))
            node = node.next
        return "[" + ", ".join(parts) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
