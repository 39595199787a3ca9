"""Bounded array stack and unbounded linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 5


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when taking from an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("the stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("the stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackUnderflowError("the stack is empty")
        return self._items[-1]

    def peek(self, position: int) -> Any:
        """Return the value at ``position``, counting the top as 1."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"no position {position} in the stack")
        return self._items[-position]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top down."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "\t".join(map(str, self))


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedStack:
    """An unbounded stack built on linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"