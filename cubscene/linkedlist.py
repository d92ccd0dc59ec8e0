"""A singly linked list of arbitrary contents."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO

from cubscene.output import putendl_fd


@dataclass
class Node:
    """One link of a list: its content and the link that follows it."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list reached through its head node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each present content to delete first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None and node.content is not None:
                delete(node.content)
            node.content = None
            node.next = None
            node = following
        self.head = None

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call func on each content in order, stopping at the first missing one."""
        for node in self._nodes():
            if node.content is None:
                return
            func(node.content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func applied to each content."""
        return LinkedList(func(content) for content in self)

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Write each content on its own line."""
        target = sys.stdout if stream is None else stream
        for content in self:
            if content is not None:
                putendl_fd(str(content), target)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())