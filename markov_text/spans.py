"""Offset ranges into the corpus and the sliding word window."""

from __future__ import annotations

from typing import Generic, List, NamedTuple, Optional, TypeVar

T = TypeVar("T")


class Span(NamedTuple):
    """Half-open ``[start, end)`` character range into a corpus string.

    Spans never own text: they are only meaningful next to the corpus they
    were cut from.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def text(self, corpus: str) -> str:
        return corpus[self.start : self.end]


class RingBuffer(Generic[T]):
    """Fixed-capacity buffer whose indices wrap around modulo its capacity.

    Writing index ``capacity`` overwrites index ``0``, so a monotonically
    growing counter can be used as the write position.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._data: List[Optional[T]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Optional[T]:
        return self._data[index % len(self._data)]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[index % len(self._data)] = value

    def snapshot(self, offset: int) -> List[Optional[T]]:
        """Return the contents rotated to start at ``offset``.

        After writing position ``n - 1``, ``snapshot(n)`` lists the window
        from oldest to newest entry.
        """
        size = len(self._data)
        return [self._data[(i + offset) % size] for i in range(size)]
