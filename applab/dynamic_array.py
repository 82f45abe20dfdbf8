"""A dynamic array of words with constant-step growth."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

GROWTH_AMOUNT = 100
MAX_STR_LEN = 256


class DynamicArray:
    """Array that grows its capacity by ``GROWTH_AMOUNT`` whenever it is full."""

    def __init__(self, initial_size: int = 0) -> None:
        if initial_size < 0:
            raise ValueError("initial size must not be negative")
        self.capacity = initial_size
        self._items: list[Any] = []

    def push(self, item: Any) -> int:
        """Append ``item`` and return the index it was stored at."""
        if len(self._items) >= self.capacity:
            self.capacity += GROWTH_AMOUNT
        self._items.append(item)
        return len(self._items) - 1

    def search(self, text: str) -> Any | None:
        """Return the first stored item equal to ``text`` (first MAX_STR_LEN chars), or None."""
        key = text[:MAX_STR_LEN]
        return next(
            (item for item in self._items if str(item)[:MAX_STR_LEN] == key),
            None,
        )

    def clear(self) -> None:
        """Drop every entry and release the capacity."""
        self._items.clear()
        self.capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"DynamicArray(len={len(self)}, capacity={self.capacity})"