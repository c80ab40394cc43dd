"""A minimal singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list holding arbitrary contents."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the start of the list."""
        self.head = Node(content, self.head)

    def push_back(self, content: Any) -> None:
        """Append ``content`` at the end of the list."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """The final node, or ``None`` for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing every content to ``delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node = following
        self.head = None

    def for_each(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on every content in order."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> Optional["LinkedList"]:
        """Build a new list from ``f`` applied to every content.

        If ``f`` returns ``None`` for any content, the contents mapped so far
        are passed to ``delete`` and ``None`` is returned.
        """
        result = LinkedList()
        for content in self:
            mapped = f(content)
            if mapped is None:
                result.clear(delete)
                return None
            result.push_back(mapped)
        return result