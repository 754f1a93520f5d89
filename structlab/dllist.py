"""Doubly linked list with head and tail, push at both ends and interleaving merge."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

__all__ = ["DLList"]

T = TypeVar("T")


def _format(value: Any) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


@dataclass(eq=False)
class _Node(Generic[T]):
    data: T
    next: Optional[_Node[T]] = field(default=None, repr=False)
    prev: Optional[_Node[T]] = field(default=None, repr=False)


class DLList(Generic[T]):
    """Doubly linked list keeping both a head and a tail reference."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: T) -> None:
        """Add ``value`` at the end of the list."""
        self.push_back(value)

    def push_front(self, value: T) -> None:
        """Add ``value`` at the start of the list."""
        new = _Node(value, next=self._head)
        if self._head is None:
            self._tail = new
        else:
            self._head.prev = new
        self._head = new

    def push_back(self, value: T) -> None:
        """Add ``value`` after the tail in constant time."""
        new = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = new
        else:
            self._tail.next = new
        self._tail = new

    def delete(self, target: T) -> bool:
        """Remove the first occurrence of ``target``; return False if it is absent.

        Deleting from an empty list raises IndexError.
        """
        if self._head is None:
            raise IndexError("Can't delete from an empty list")
        for node in self._nodes():
            if node.data == target:
                self._unlink(node)
                return True
        return False

    def _unlink(self, node: _Node[T]) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._head is None

    def merge(self, other: DLList[T]) -> None:
        """Interleave the nodes of ``other`` into this list, emptying ``other``.

        The result alternates this list's and ``other``'s elements; whichever
        list is longer contributes its remaining elements at the end. Merging
        when either list is empty raises ValueError.
        """
        if other is self:
            raise ValueError("cannot merge a list with itself")
        if self.is_empty() or other.is_empty():
            raise ValueError("A List is empty. No merge")
        first = self._head
        second = other._head
        tail = self._tail
        while first is not None and second is not None:
            first_next = first.next
            second_next = second.next
            first.next = second
            second.prev = first
            if first_next is not None:
                second.next = first_next
                first_next.prev = second
            else:
                tail = other._tail
            first = first_next
            second = second_next
        self._tail = tail
        other._head = other._tail = None

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self._head is not None

    def __contains__(self, value: object) -> bool:
        return any(node.data == value for node in self._nodes())

    def __copy__(self) -> DLList[T]:
        return type(self)(self)

    def __str__(self) -> str:
        if self._head is None:
            return "The list is empty"
        return "".join(f"{_format(value)} " for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"