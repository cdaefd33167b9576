"""Hash table using cuckoo hashing over two tables."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .dictionary import Dictionary

_U64 = 1 << 64
_MAX_KICKS = 32

_Entry = Optional[Tuple[int, Any]]


def _hash1(key: int, capacity: int) -> int:
    return (((key % _U64) * 2654435761) % _U64) % capacity


def _hash2(key: int, capacity: int) -> int:
    return (((key % _U64) * 40503 + 97) % _U64) % capacity


class HashTableCuckoo(Dictionary):
    """Two tables with separate hash functions; entries evict one another.

    When an insertion keeps displacing entries for too long, both tables grow
    to ``2 * capacity + 1`` slots. After more than a quarter of the capacity
    has been removed, the tables are rebuilt at the same size.
    """

    def __init__(self, size: int = 101) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._capacity = size
        self._table1: List[_Entry] = [None] * size
        self._table2: List[_Entry] = [None] * size
        self._removed = 0

    @property
    def capacity(self) -> int:
        """Number of slots in each of the two tables."""
        return self._capacity

    def insert(self, key: int, value: Any) -> None:
        k, v = key, value
        while True:
            for _ in range(_MAX_KICKS):
                i1 = _hash1(k, self._capacity)
                slot = self._table1[i1]
                self._table1[i1] = (k, v)
                if slot is None or slot[0] == k:
                    return
                k, v = slot

                i2 = _hash2(k, self._capacity)
                slot = self._table2[i2]
                self._table2[i2] = (k, v)
                if slot is None or slot[0] == k:
                    return
                k, v = slot
            self._rehash(grow=True)

    def remove(self, key: int) -> None:
        for table, index in (
            (self._table1, _hash1(key, self._capacity)),
            (self._table2, _hash2(key, self._capacity)),
        ):
            slot = table[index]
            if slot is not None and slot[0] == key:
                table[index] = None
                self._removed += 1
                if self._removed > self._capacity // 4:
                    self._rehash(grow=False)
                    self._removed = 0
                return

    def find(self, key: int) -> Optional[Any]:
        slot = self._table1[_hash1(key, self._capacity)]
        if slot is not None and slot[0] == key:
            return slot[1]
        slot = self._table2[_hash2(key, self._capacity)]
        if slot is not None and slot[0] == key:
            return slot[1]
        return None

    def _rehash(self, grow: bool) -> None:
        new_capacity = self._capacity * 2 + 1 if grow else self._capacity
        new_table1: List[_Entry] = [None] * new_capacity
        new_table2: List[_Entry] = [None] * new_capacity
        for pair in zip(self._table1, self._table2):
            for entry in pair:
                if entry is None:
                    continue
                index = _hash1(entry[0], new_capacity)
                if new_table1[index] is None:
                    new_table1[index] = entry
                else:
                    new_table2[_hash2(entry[0], new_capacity)] = entry
        self._table1 = new_table1
        self._table2 = new_table2
        self._capacity = new_capacity