"""Array-backed linear and circular queues."""

from __future__ import annotations

from typing import Any

DEFAULT_SIZE = 4


class QueueFullError(OverflowError):
    """Raised when enqueuing into a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class LinearQueue:
    """A queue over ``size`` slots whose rear never wraps around.

    Slot 0 is never used and dequeued slots are not reclaimed, so at most
    ``size - 1`` values can ever be enqueued.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._rear == self._front

    def is_full(self) -> bool:
        return self._rear == self.size - 1

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("the queue is full")
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("the queue is empty")
        self._front += 1
        return self._slots[self._front]

    def __len__(self) -> int:
        return self._rear - self._front


class CircularQueue:
    """A queue over ``size`` slots that wraps around; it holds ``size - 1`` values."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.size == self._front

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("overflow")
        self._rear = (self._rear + 1) % self.size
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("underflow")
        self._front = (self._front + 1) % self.size
        return self._slots[self._front]

    def __len__(self) -> int:
        return (self._rear - self._front) % self.size