"""A growable array with explicit capacity, and a sorted variant."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

__all__ = ["DynArr", "SortedDynArr"]

T = TypeVar("T")


def _format(value: Any) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


class DynArr(Generic[T]):
    """Array that doubles its capacity when full and halves it on shrinking."""

    INITIAL_CAPACITY = 8

    def __init__(self, size: int = 0, default: Any = None) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._items: list[Any] = [default] * size
        self._capacity = size or self.INITIAL_CAPACITY

    @property
    def capacity(self) -> int:
        """The number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for length {len(self._items)}")
        return index

    def __getitem__(self, index: int) -> T:
        return self._items[self._check(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._check(index)] = value

    def first(self) -> T:
        """Return the first element."""
        if not self._items:
            raise IndexError("array is empty")
        return self._items[0]

    def last(self) -> T:
        """Return the last element."""
        if not self._items:
            raise IndexError("array is empty")
        return self._items[-1]

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            # A capacity of zero (after shrinking a one-slot array) restarts at one.
            self._capacity = max(self._capacity * 2, 1)

    def push_back(self, value: T) -> None:
        """Append ``value``, doubling the capacity first if the array is full."""
        self._grow_if_full()
        self._items.append(value)

    def erase(self, index: int) -> None:
        """Remove the element at ``index``; an index out of range is ignored.

        The capacity is halved when the remaining size equals half of it.
        """
        if not 0 <= index < len(self._items):
            return
        if len(self._items) - 1 == self._capacity // 2:
            self._capacity //= 2
        del self._items[index]

    def __copy__(self) -> DynArr[T]:
        clone = type(self).__new__(type(self))
        clone._items = list(self._items)
        clone._capacity = self._capacity
        return clone

    def __str__(self) -> str:
        return "{" + "".join(f"{_format(value)}, " for value in self._items) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


class SortedDynArr(DynArr[T]):
    """Dynamic array whose ``insert`` keeps the elements in ascending order."""

    def insert(self, value: T) -> None:
        """Place ``value`` before the first element not smaller than it."""
        self._grow_if_full()
        self._items.insert(bisect.bisect_left(self._items, value), value)

    def __str__(self) -> str:
        return "".join(f"{_format(value)} " for value in self._items)