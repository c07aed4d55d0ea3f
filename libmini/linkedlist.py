"""A singly linked list of arbitrary items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator

__all__ = ["ListNode", "LinkedList"]


@dataclass(eq=False)
class ListNode:
    """One link of a LinkedList."""

    content: Any
    next: ListNode | None = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable = ()):
        self.head: ListNode | None = None
        for item in items:
            self.push_back(item)

    def push_front(self, item) -> ListNode:
        """Insert item at the front and return its node."""
        node = ListNode(item, self.head)
        self.head = node
        return node

    def push_back(self, item) -> ListNode:
        """Append item at the end and return its node."""
        node = ListNode(item)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> ListNode | None:
        """Return the final node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator:
        for node in self._nodes():
            yield node.content

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on every item, front to back."""
        for item in self:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding func applied to every item."""
        return LinkedList(func(item) for item in self)

    def clear(self, func: Callable[[Any], object] | None = None) -> None:
        """Empty the list, passing each item to func first if one is given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if func is not None:
                func(node.content)
            node.next = None
            node = following