"""Singly linked lists, a sorted variant, and a bucket sort built on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, TypeVar

__all__ = ["SLList", "SortedSLL", "bucket_sort"]

T = TypeVar("T")

BUCKET_WIDTH = 10
DEFAULT_BUCKETS = 10


def _format(value: Any) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional[_Node[T]] = None


class SLList(Generic[T]):
    """Singly linked list that appends at the tail and can push at the head."""

    _EMPTY_TEXT = "The list is empty\n"

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: T) -> None:
        """Add ``value`` at the end of the list."""
        new = _Node(value)
        if self._head is None:
            self._head = new
            return
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = new

    def push_front(self, value: T) -> None:
        """Add ``value`` at the start of the list."""
        self._head = _Node(value, self._head)

    def delete(self, target: T) -> bool:
        """Remove the first occurrence of ``target``; return False if it is absent.

        Deleting from an empty list raises IndexError.
        """
        if self._head is None:
            raise IndexError("Can't delete from an empty list")
        if self._head.data == target:
            self._head = self._head.next
            return True
        prev = self._head
        while prev.next is not None:
            if prev.next.data == target:
                prev.next = prev.next.next
                return True
            prev = prev.next
        return False

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._head is None

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self._head is not None

    def __contains__(self, value: object) -> bool:
        return any(node.data == value for node in self._nodes())

    def __copy__(self) -> SLList[T]:
        clone = type(self).__new__(type(self))
        clone._head = None
        tail: Optional[_Node[T]] = None
        for value in self:
            node = _Node(value)
            if tail is None:
                clone._head = node
            else:
                tail.next = node
            tail = node
        return clone

    def __str__(self) -> str:
        if self._head is None:
            return self._EMPTY_TEXT
        return "".join(f"{_format(value)} " for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SortedSLL(SLList[T]):
    """Singly linked list whose ``insert`` keeps the elements in ascending order."""

    _EMPTY_TEXT = "The list is empty"

    def insert(self, value: T) -> None:
        """Place ``value`` before the first element not smaller than it."""
        prev: Optional[_Node[T]] = None
        curr = self._head
        while curr is not None and value > curr.data:  # type: ignore[operator]
            prev = curr
            curr = curr.next
        new = _Node(value, curr)
        if prev is None:
            self._head = new
        else:
            prev.next = new

    def append(self, value: T) -> None:
        """Add ``value`` in its sorted position."""
        self.insert(value)


class _SortedContainer(Protocol):
    def insert(self, value: Any) -> None: ...

    def __iter__(self) -> Iterator[Any]: ...


def bucket_sort(
    values: Iterable[int],
    num_buckets: int = DEFAULT_BUCKETS,
    container: Callable[[], _SortedContainer] = SortedSLL,
) -> list[int]:
    """Sort non-negative integers by dropping each into bucket ``value // 10``.

    Each bucket is a sorted container built by ``container()``; the buckets
    are read back in order. A value whose bucket does not exist raises
    ValueError.
    """
    if num_buckets < 1:
        raise ValueError(f"need at least one bucket, got {num_buckets}")
    buckets = [container() for _ in range(num_buckets)]
    for value in values:
        index = value // BUCKET_WIDTH
        if value < 0 or index >= num_buckets:
            raise ValueError(f"{value} does not fit in {num_buckets} buckets")
        buckets[index].insert(value)
    return [value for bucket in buckets for value in bucket]