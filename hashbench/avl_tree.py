"""Self-balancing AVL binary search tree mapping keys to values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple


@dataclass(slots=True, eq=False)
class _Node:
    key: Any
    value: Any
    height: int = 1
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_left(y: _Node) -> _Node:
    x = y.right
    assert x is not None
    y.right = x.left
    x.left = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_right(x: _Node) -> _Node:
    y = x.left
    assert y is not None
    x.left = y.right
    y.right = x
    _refresh(x)
    _refresh(y)
    return y


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class AVLTree:
    """AVL tree keyed by comparable keys; lookups return ``None`` when absent."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` or overwrite its value if it already exists."""
        self._root = self._insert(self._root, key, value)

    def _insert(self, node: Optional[_Node], key: Any, value: Any) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key, value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif key > node.key:
            node.right = self._insert(node.right, key, value)
        else:
            node.value = value
            return node

        _refresh(node)
        bal = _balance(node)
        if bal > 1 and key < node.left.key:
            return _rotate_right(node)
        if bal < -1 and key > node.right.key:
            return _rotate_left(node)
        if bal > 1 and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if bal < -1 and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        self._root = self._remove(self._root, key)

    def _remove(self, node: Optional[_Node], key: Any) -> Optional[_Node]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        elif node.left is None or node.right is None:
            self._size -= 1
            node = node.left if node.left is not None else node.right
        else:
            successor = _min_node(node.right)
            node.key = successor.key
            node.value = successor.value
            node.right = self._remove(node.right, successor.key)

        if node is None:
            return None

        _refresh(node)
        bal = _balance(node)
        if bal > 1 and _balance(node.left) >= 0:
            return _rotate_right(node)
        if bal > 1 and _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if bal < -1 and _balance(node.right) <= 0:
            return _rotate_left(node)
        if bal < -1 and _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def find(self, key: Any) -> Optional[Any]:
        """Return the value stored under ``key``, or ``None``."""
        current = self._root
        while current is not None:
            if key == current.key:
                return current.value
            current = current.left if key < current.key else current.right
        return None

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.key, current.value
            current = current.right

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())