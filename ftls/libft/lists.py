"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass
class Node:
    """One link of a ContentList."""

    content: Any = None
    next: Optional["Node"] = None


class ContentList:
    """A singly linked list that grows at the front."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None

    def push_front(self, content: Any) -> Node:
        """Put content at the front of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def pop_front(self, delete: Optional[Callable[[Any], Any]]) -> Any:
        """Remove the first node, passing its content to delete, and return the content.

        Without a delete callback, or on an empty list, nothing is removed
        and None is returned.
        """
        if self.head is None or delete is None:
            return None
        node = self.head
        self.head = node.next
        node.next = None
        delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Remove every node front to back, passing each content to delete.

        Without a delete callback the list is left untouched.
        """
        if delete is None:
            return
        while self.head is not None:
            self.pop_front(delete)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def iterate(self, f: Optional[Callable[[Node], Any]]) -> None:
        """Call f on every node, front to back."""
        if f is None:
            return
        for node in self._nodes():
            f(node)

    def map(self, f: Optional[Callable[[Node], Optional[Node]]]) -> "ContentList":
        """A new list of the nodes f returns for each node, in order.

        The new list ends at the first node for which f returns None.
        """
        result = ContentList()
        if f is None:
            return result
        tail: Optional[Node] = None
        for node in self._nodes():
            produced = f(node)
            if produced is None:
                break
            produced.next = None
            if tail is None:
                result.head = produced
            else:
                tail.next = produced
            tail = produced
        return result

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())