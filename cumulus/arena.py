"""Linear (bump) allocator bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field

GROWTH_FACTOR = 1.5


class ArenaOverflowError(MemoryError):
    """Raised when a fixed arena cannot hold a requested block."""


@dataclass
class Arena:
    """A region of ``capacity`` bytes handed out front to back.

    ``push`` returns the offset of the new block. Fixed arenas raise
    :class:`ArenaOverflowError` when full; expandable arenas grow.
    """

    capacity: int
    expandable: bool = False
    size: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("arena capacity must not be negative")

    def _grow(self) -> None:
        new_capacity = int(self.capacity * GROWTH_FACTOR)
        self.capacity = new_capacity if new_capacity > self.capacity else self.capacity + 1

    def _shrink(self) -> None:
        self.capacity = int(self.capacity / GROWTH_FACTOR)

    def push(self, size: int) -> int:
        """Reserve ``size`` bytes and return the offset where they start."""
        if size < 0:
            raise ValueError("cannot push a negative number of bytes")
        while self.capacity < self.size + size:
            if not self.expandable:
                raise ArenaOverflowError(
                    f"arena of capacity {self.capacity} cannot fit {size} more bytes "
                    f"(in use: {self.size})"
                )
            self._grow()
        offset = self.size
        self.size += size
        return offset

    def pop(self, size: int) -> None:
        """Release the last ``size`` bytes pushed."""
        if size < 0 or size > self.size:
            raise ValueError(f"cannot pop {size} bytes from an arena holding {self.size}")
        self.size -= size
        if self.expandable and self.size < self.capacity / GROWTH_FACTOR:
            self._shrink()

    def push_to_capacity(self) -> int:
        """Reserve everything that is left and return its offset."""
        return self.push(self.capacity - self.size)

    def fits(self, size: int) -> bool:
        """Whether ``size`` more bytes fit; always false for expandable arenas."""
        return self.size + size <= self.capacity and not self.expandable

    def remaining_capacity(self) -> int:
        """Bytes that can still be pushed without growing."""
        return self.capacity - self.size

    def clear(self) -> None:
        """Release every block; the arena stays usable."""
        self.size = 0

    def free(self) -> None:
        """Release the arena's storage entirely."""
        self.capacity = 0
        self.size = 0