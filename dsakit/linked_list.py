"""Singly, circular and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    prev: _DoubleNode | None = None
    next: _DoubleNode | None = None


class LinkedList:
    """A singly linked list that grows and shrinks at either end or inside."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.push_front(value)

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        Position 0 is not accepted here; use ``push_front`` for it.
        """
        if not 0 < index <= self._size:
            raise IndexError(f"cannot insert at position {index}")
        previous = self._node_at(index - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        if self._head is None:
            self.push_front(value)
            return
        last = self._node_at(self._size - 1)
        last.next = _Node(value)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("the list is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_at(self, index: int) -> Any:
        """Remove the node at position ``index`` (1 or later) and return its value."""
        if not 0 < index < self._size:
            raise IndexError(f"cannot delete at position {index}")
        previous = self._node_at(index - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def pop_back(self) -> Any:
        """Remove the last node and return its value."""
        if self._head is None:
            raise IndexError("the list is empty")
        if self._size == 1:
            return self.pop_front()
        previous = self._node_at(self._size - 2)
        assert previous.next is not None
        value = previous.next.value
        previous.next = None
        self._size -= 1
        return value

    def remove(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        previous: _Node | None = None
        node = self._head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return True
            previous, node = node, node.next
        return False

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: _Node | None = None
        node = self._head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_first(value)
            assert self._tail is not None
            self._tail = self._tail.next

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` as the new first node."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        start = self._tail.next
        node = start
        while True:
            assert node is not None
            yield node.value
            node = node.next
            if node is start:
                break

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "END LINKED LIST"


class DoublyLinkedList:
    """A linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "END LINKED LIST"