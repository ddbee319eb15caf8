"""A singly linked list with positional insertion, removal and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list; positions are counted from 1."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for item in items:
            node = _Node(item)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node:
        if position < 1:
            raise IndexError("position must be 1 or more")
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError("there are fewer elements than the position")

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` right after the element at ``position``."""
        node = self._node_at(position)
        node.next = _Node(value, node.next)
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position`` (up to ``len + 1``).

        Raises ``IndexError`` for an empty list or a position out of range.
        """
        if self._head is None and position > 0:
            raise IndexError("list has no elements")
        if position < 1:
            raise IndexError("position must be 1 or more")
        if position == 1:
            self.prepend(value)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def remove(self, value: Any) -> Any:
        """Remove the first element equal to ``value`` and return it."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return node.value
            previous = node
        raise ValueError(f"{value!r} not found in list")

    def remove_at(self, position: int) -> Any:
        """Remove the element at ``position`` and return its value."""
        if self._head is None:
            raise IndexError("list is empty")
        if position < 1:
            raise IndexError("position must be 1 or more")
        if position == 1:
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            if removed is None:
                raise IndexError("position exceeds the length of the list")
            previous.next = removed.next
        self._size -= 1
        return removed.value

    def find(self, value: Any) -> int | None:
        """Return the position of the first element equal to ``value``, or ``None``."""
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        return None

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: _Node | None = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous