"""A FIFO list of words with bounded string length."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

MAX_BUFF_LEN = 256


class LinkedList:
    """Queue of words: append at the back, remove from the front.

    Stored words are limited to ``MAX_BUFF_LEN - 1`` characters; longer input
    is truncated.
    """

    def __init__(self) -> None:
        self._nodes: deque[str] = deque()

    def append(self, text: str) -> None:
        """Add ``text`` (truncated to the buffer size) to the back of the list."""
        self._nodes.append(text[: MAX_BUFF_LEN - 1])

    def pop_front(self) -> str | None:
        """Remove and return the front word, or None when the list is empty."""
        if not self._nodes:
            return None
        return self._nodes.popleft()

    def clear(self) -> None:
        """Remove every word."""
        self._nodes.clear()

    def search(self, text: str) -> bool:
        """Return True if a stored word equals ``text`` over the buffer length."""
        key = text[:MAX_BUFF_LEN]
        return any(word[:MAX_BUFF_LEN] == key for word in self._nodes)

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.search(text)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._nodes)!r})"