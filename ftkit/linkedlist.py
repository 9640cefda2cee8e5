"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the link that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose links are exposed as :class:`Node` objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Add ``content`` as the new first link and return that link."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Add ``content`` as the new last link and return that link."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last link, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every link, passing each value to ``delete`` first if given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every value, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of ``f(value)`` for every value.

        If ``f`` raises, the values already produced are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result