"""Hash table using open addressing with double hashing."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple, Union

from .dictionary import Dictionary

_U64 = 1 << 64
_MAX_LOAD = 0.8


class HashTableFullError(OverflowError):
    """Raised when no free slot can be found for a new key."""


class _Deleted:
    """Marker for a slot whose entry has been removed."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<deleted>"


_DELETED = _Deleted()

_Slot = Union[None, _Deleted, Tuple[int, Any]]


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def next_prime(n: int) -> int:
    """Return the smallest prime that is not less than ``n``."""
    while not is_prime(n):
        n += 1
    return n


def _probe(key: int, capacity: int) -> Iterator[int]:
    """Yield the slot indices visited for ``key`` in a table of ``capacity``."""
    h = key % _U64
    start = (h ^ (h >> 16)) % capacity
    step = 1 + ((h ^ (h >> 8)) % (capacity - 1))
    for i in range(capacity):
        yield (start + i * step) % capacity


class HashTableOpenAddressing(Dictionary):
    """Open-addressing table with double hashing, tombstones and rehashing.

    The capacity is always prime, so every probe sequence visits every slot.
    The table grows once the load factor would exceed 0.8 and is cleaned of
    tombstones once more than a quarter of its slots have been deleted.
    """

    def __init__(self, size: int = 101) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._capacity = next_prime(size)
        self._slots: List[_Slot] = [None] * self._capacity
        self._count = 0
        self._deleted = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return self._capacity

    def __len__(self) -> int:
        return self._count

    def count_occupied(self) -> int:
        """Count the slots that currently hold an entry."""
        return sum(1 for slot in self._slots if isinstance(slot, tuple))

    def insert(self, key: int, value: Any) -> None:
        if (self._count + 1) / self._capacity > _MAX_LOAD:
            self._rehash(grow=True)
        for index in _probe(key, self._capacity):
            slot = self._slots[index]
            if slot is None or slot is _DELETED:
                self._slots[index] = (key, value)
                self._count += 1
                return
            if slot[0] == key:  # type: ignore[index]
                self._slots[index] = (key, value)
                return
        raise HashTableFullError("Hash table is full")

    def remove(self, key: int) -> None:
        for index in _probe(key, self._capacity):
            slot = self._slots[index]
            if slot is None:
                return
            if slot is not _DELETED and slot[0] == key:  # type: ignore[index]
                self._slots[index] = _DELETED
                self._count -= 1
                self._deleted += 1
                if self._deleted > self._capacity // 4:
                    self._rehash(grow=False)
                    self._deleted = 0
                return

    def find(self, key: int) -> Optional[Any]:
        for index in _probe(key, self._capacity):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _DELETED and slot[0] == key:  # type: ignore[index]
                return slot[1]  # type: ignore[index]
        return None

    def _rehash(self, grow: bool) -> None:
        new_capacity = next_prime(self._capacity * 2 + 1) if grow else self._capacity
        new_slots: List[_Slot] = [None] * new_capacity
        for slot in self._slots:
            if not isinstance(slot, tuple):
                continue
            for index in _probe(slot[0], new_capacity):
                if new_slots[index] is None:
                    new_slots[index] = slot
                    break
        self._slots = new_slots
        self._capacity = new_capacity