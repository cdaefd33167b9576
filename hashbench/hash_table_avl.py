"""Hash table whose buckets are AVL trees."""

from __future__ import annotations

from typing import Any, Optional

from .avl_tree import AVLTree
from .dictionary import Dictionary

_MIX = 0x45D9F3B
_SIZE_MODULUS = 1 << 64


def _to_int32(x: int) -> int:
    x &= 0xFFFFFFFF
    return x - (1 << 32) if x & 0x80000000 else x


class HashTableAVL(Dictionary):
    """Fixed number of buckets, each an AVL tree holding colliding keys."""

    def __init__(self, size: int = 101) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._capacity = size
        self._buckets = [AVLTree() for _ in range(size)]

    def bucket_index(self, key: int) -> int:
        """Index of the bucket that ``key`` hashes to."""
        k = _to_int32(key)
        k = _to_int32(((k >> 16) ^ k) * _MIX)
        k = _to_int32(((k >> 16) ^ k) * _MIX)
        k = (k >> 16) ^ k
        return (k % _SIZE_MODULUS) % self._capacity

    def insert(self, key: int, value: Any) -> None:
        self._buckets[self.bucket_index(key)].insert(key, value)

    def remove(self, key: int) -> None:
        self._buckets[self.bucket_index(key)].remove(key)

    def find(self, key: int) -> Optional[Any]:
        return self._buckets[self.bucket_index(key)].find(key)