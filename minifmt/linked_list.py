"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its head, tail and length."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        if iterable is not None:
            for item in iterable:
                self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert a new node holding ``content`` at the front and return it."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append a new node holding ``content`` at the back and return it."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def pop_front(self, delete: Callable[[Any], Any] | None = None) -> Any:
        """Remove the first node and return its content.

        ``delete`` is called on the content first when it is not None.
        Raises IndexError on an empty list.
        """
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None and node.content is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, calling ``delete`` on each content that is not None."""
        if delete is not None:
            for content in self:
                if content is not None:
                    delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on the content of every node, front to back."""
        if f is None:
            raise TypeError("a callback function is required")
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``f(content)`` for every node.

        If ``f`` raises, the contents built so far are passed to ``delete``
        and the exception propagates.
        """
        if f is None:
            raise TypeError("a mapping function is required")
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result