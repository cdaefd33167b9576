"""Common interface shared by the dictionary implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class Dictionary(ABC):
    """Abstract key/value store with insert, remove and lookup.

    ``find`` returns the stored value, or ``None`` when the key is absent.
    The mapping dunders are built on top of those three operations.
    """

    @abstractmethod
    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove(self, key: int) -> None:
        """Delete ``key``; a missing key is silently ignored."""

    @abstractmethod
    def find(self, key: int) -> Optional[Any]:
        """Return the value stored under ``key``, or ``None`` if absent."""

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None  # type: ignore[arg-type]

    def __getitem__(self, key: int) -> Any:
        value = self.find(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: int, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: int) -> None:
        if key not in self:
            raise KeyError(key)
        self.remove(key)