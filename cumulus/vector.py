"""A growable sequence that tracks a reserved capacity."""

from __future__ import annotations

import math
from typing import Any, Iterator

INIT_CAPACITY = 2
GROWTH_FACTOR = 1.5


class Vector:
    """Ordered container with explicit get/set/insert/remove and capacity bookkeeping."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._capacity = INIT_CAPACITY

    @property
    def capacity(self) -> int:
        """Number of reserved slots."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of bounds for vector of size {len(self._items)}")

    def _grow(self) -> None:
        self._capacity = math.ceil(self._capacity * GROWTH_FACTOR)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, value: Any) -> None:
        """Replace the element at ``index``."""
        self._check_index(index)
        self._items[index] = value

    def insert(self, index: int, value: Any) -> None:
        """Insert before an existing element at ``index``."""
        self._check_index(index)
        if len(self._items) + 1 >= self._capacity:
            self._grow()
        self._items.insert(index, value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        if len(self._items) + 1 >= self._capacity:
            self._grow()
        self._items.append(value)

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        value = self._items.pop(index)
        threshold = math.ceil(self._capacity / GROWTH_FACTOR)
        if not self._items:
            self._capacity = INIT_CAPACITY
        elif len(self._items) < threshold:
            self._capacity = threshold
        return value

    def clear(self) -> None:
        """Drop every element and reset the capacity."""
        self._items.clear()
        self._capacity = INIT_CAPACITY