"""Open-addressing hash tables (linear probing, double hashing) and separate chaining."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Optional, TypeVar, Union

from structlab.primes import next_prime

__all__ = [
    "EntryState",
    "hash_func",
    "hash_func2",
    "LinearProbeTable",
    "DoubleHashTable",
    "SeparateChain",
]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

STEP_SIZE = 1
COLLISION_RATE = 2
DEFAULT_BUCKETS = 7
_U32 = 0xFFFFFFFF


class EntryState(enum.Enum):
    """State of one slot in an open-addressing table."""

    ACTIVE = "ACTIVE"
    EMPTY = "EMPTY"
    DELETED = "DELETED"


def _c_mod(a: int, b: int) -> int:
    """Remainder that keeps the sign of the dividend, as integer division truncates."""
    r = abs(a) % b
    return -r if a < 0 else r


def hash_func(value: Union[int, str]) -> int:
    """Primary hash: an integer is its own hash, a string hashes to its length."""
    if isinstance(value, str):
        return len(value)
    if isinstance(value, int):
        return value
    raise TypeError(f"cannot hash value of type {type(value).__name__}")


def hash_func2(value: Union[int, str]) -> int:
    """Secondary hash for double hashing: ``3 - v % 3`` or ``5 - len % 5``."""
    if isinstance(value, str):
        return 5 - len(value) % 5
    if isinstance(value, int):
        return 3 - _c_mod(value, 3)
    raise TypeError(f"cannot hash value of type {type(value).__name__}")


def _format_value(value: Any) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


@dataclass
class _Slot:
    key: Any = None
    value: Any = None
    state: EntryState = EntryState.EMPTY


class LinearProbeTable(Generic[K, V]):
    """Hash table resolving collisions by stepping one slot at a time.

    The capacity is always prime; the table grows to the next prime after
    twice its size once more than half of the slots are in use. Removal is
    lazy: a removed slot is marked DELETED and ends a probe sequence.
    """

    _FIRST_ATTEMPT = 0

    def __init__(self, size: int = 0) -> None:
        self._slots = [_Slot() for _ in range(next_prime(size))]
        self._count = 0

    @property
    def capacity(self) -> int:
        """The number of slots in the table."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def _probe(self, key: K, attempt: int) -> int:
        return ((hash_func(key) + attempt * STEP_SIZE) & _U32) % self.capacity

    def _find(self, key: K) -> Optional[int]:
        """Return the slot holding ``key`` or where it would go, or None if none is free."""
        attempt = self._FIRST_ATTEMPT
        while True:
            pos = self._probe(key, attempt)
            attempt += 1
            slot = self._slots[pos]
            if (
                slot.state is not EntryState.ACTIVE
                or slot.key == key
                or attempt >= self.capacity
            ):
                break
        if slot.state is EntryState.ACTIVE and slot.key != key:
            return None
        return pos

    def _is_active(self, pos: Optional[int]) -> bool:
        return pos is not None and self._slots[pos].state is EntryState.ACTIVE

    def _rehash(self) -> None:
        old = self._slots
        self._slots = [_Slot() for _ in range(next_prime(COLLISION_RATE * len(old)))]
        # The entry being inserted is already counted.
        self._count = 1
        for slot in old:
            if slot.state is EntryState.ACTIVE:
                self.insert(slot.key, slot.value)

    def insert(self, key: K, value: V) -> bool:
        """Store ``value`` under ``key``; return False if ``key`` is already present."""
        pos = self._find(key)
        if self._is_active(pos):
            return False
        self._count += 1
        if self._count > self.capacity // 2:
            self._rehash()
            pos = self._find(key)
        if pos is None:
            self._count -= 1
            raise RuntimeError(f"no free slot found for key {key!r}")
        self._slots[pos] = _Slot(key, value, EntryState.ACTIVE)
        return True

    def remove(self, key: K) -> bool:
        """Mark the entry for ``key`` as deleted; return False if it is absent."""
        pos = self._find(key)
        if not self._is_active(pos):
            return False
        self._slots[pos].state = EntryState.DELETED
        self._count -= 1
        return True

    def __contains__(self, key: object) -> bool:
        try:
            pos = self._find(key)  # type: ignore[arg-type]
        except TypeError:
            return False
        if pos is None:
            return False
        slot = self._slots[pos]
        return slot.key == key and slot.state is EntryState.ACTIVE

    def __getitem__(self, key: K) -> V:
        pos = self._find(key)
        if pos is None:
            raise KeyError(key)
        slot = self._slots[pos]
        if slot.key != key or slot.state is not EntryState.ACTIVE:
            raise KeyError(key)
        return slot.value

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield the active ``(key, value)`` pairs in slot order."""
        for slot in self._slots:
            if slot.state is EntryState.ACTIVE:
                yield slot.key, slot.value

    def format(self) -> str:
        """Render the element count, the capacity and every slot, one per line."""
        lines = [f"# of Hashed Elements: {self._count} Hash Capacity: {self.capacity}"]
        for index, slot in enumerate(self._slots):
            if slot.state is EntryState.EMPTY:
                body = "EMPTY, "
            else:
                body = (
                    f"{slot.state.value}, {_format_value(slot.key)}, "
                    f"{_format_value(slot.value)}"
                )
            lines.append(f"{{{index}, {body}}}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r}, capacity={self.capacity})"


class DoubleHashTable(LinearProbeTable[K, V]):
    """Hash table whose probe step comes from a second hash function."""

    _FIRST_ATTEMPT = 1

    def _probe(self, key: K, attempt: int) -> int:
        first = (hash_func(key) & _U32) % self.capacity
        second = (attempt * hash_func2(key)) & _U32
        return ((first + second) & _U32) % self.capacity


class SeparateChain(Generic[V]):
    """Fixed number of buckets, each a list of the values hashed to it."""

    def __init__(self, num_buckets: int = DEFAULT_BUCKETS) -> None:
        if num_buckets < 1:
            raise ValueError(f"need at least one bucket, got {num_buckets}")
        self._buckets: list[list[V]] = [[] for _ in range(num_buckets)]

    @property
    def num_buckets(self) -> int:
        """The number of buckets."""
        return len(self._buckets)

    def bucket_index(self, value: V) -> int:
        """Return the bucket that ``value`` hashes to."""
        return hash_func(value) % self.num_buckets  # type: ignore[arg-type]

    def insert(self, value: V) -> None:
        """Append ``value`` to the end of its bucket."""
        self._buckets[self.bucket_index(value)].append(value)

    def __getitem__(self, index: int) -> list[V]:
        return list(self._buckets[index])

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, value: object) -> bool:
        try:
            index = self.bucket_index(value)  # type: ignore[arg-type]
        except TypeError:
            return False
        return value in self._buckets[index]

    def format(self) -> str:
        """Render each bucket as ``i: v1 v2 ``, one per line."""
        return "\n".join(
            f"{index}: " + "".join(f"{_format_value(v)} " for v in bucket)
            for index, bucket in enumerate(self._buckets)
        )

    def __str__(self) -> str:
        return self.format()