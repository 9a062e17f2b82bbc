"""A doubly linked list whose nodes can be addressed, moved and swapped."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`DLList`."""

    data: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class DLList:
    """A doubly linked list with explicit head and tail nodes."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def find(self, predicate: Callable[[Any], bool]) -> Optional[Node]:
        """Return the first node whose data satisfies ``predicate``, or None."""
        return next((node for node in self.nodes() if predicate(node.data)), None)

    @staticmethod
    def _check_data(data: Any) -> None:
        if data is None:
            raise ValueError("cannot store None in the list")

    def _insert_first(self, data: Any) -> Node:
        node = Node(data)
        self.head = self.tail = node
        return node

    def insert_head(self, data: Any) -> Node:
        """Insert ``data`` before the head and return its node."""
        self._check_data(data)
        if self.head is None:
            return self._insert_first(data)
        node = Node(data, next=self.head)
        self.head.prev = node
        self.head = node
        return node

    def insert_tail(self, data: Any) -> Node:
        """Insert ``data`` after the tail and return its node."""
        self._check_data(data)
        if self.tail is None:
            return self._insert_first(data)
        node = Node(data, prev=self.tail)
        self.tail.next = node
        self.tail = node
        return node

    def insert(self, data: Any, above: Optional[Node], below: Optional[Node]) -> Node:
        """Insert ``data`` between ``above`` and ``below``.

        Either target may be None, in which case the new node goes directly
        after ``above`` or directly before ``below``. When both are given they
        must be adjacent.
        """
        self._check_data(data)
        if above is below:
            raise ValueError("insertion targets must differ")
        if above is not None and below is not None:
            if above.next is not below or below.prev is not above:
                raise ValueError("insertion targets are not adjacent")
        if below is not None and below is self.head:
            return self.insert_head(data)
        if above is not None and above is self.tail:
            return self.insert_tail(data)
        if above is None:
            above = below.prev
        else:
            below = above.next
        node = Node(data, next=below, prev=above)
        above.next = node
        below.prev = node
        return node

    def delete_head(self) -> Any:
        """Remove the head node and return its data."""
        if self.head is None:
            raise IndexError("delete from empty list")
        node = self.head
        if node is self.tail:
            self.head = self.tail = None
        else:
            self.head = node.next
            self.head.prev = None
        node.next = node.prev = None
        return node.data

    def delete_tail(self) -> Any:
        """Remove the tail node and return its data."""
        if self.tail is None:
            raise IndexError("delete from empty list")
        node = self.tail
        if node is self.head:
            self.head = self.tail = None
        else:
            self.tail = node.prev
            self.tail.next = None
        node.next = node.prev = None
        return node.data

    def delete(self, target: Node) -> Any:
        """Remove ``target`` from the list and return its data."""
        if target is None:
            raise ValueError("no node given")
        if target is self.head:
            return self.delete_head()
        if target is self.tail:
            return self.delete_tail()
        target.next.prev = target.prev
        target.prev.next = target.next
        target.next = target.prev = None
        return target.data

    def swap(self, a: Node, b: Node) -> None:
        """Exchange the positions of nodes ``a`` and ``b``."""
        if a is None or b is None:
            raise ValueError("no node given")
        if a is b:
            return
        if b.next is a:
            a, b = b, a
        if a.next is b:
            before, after = a.prev, b.next
            b.prev, b.next = before, a
            a.prev, a.next = b, after
        else:
            a_prev, a_next, b_prev, b_next = a.prev, a.next, b.prev, b.next
            a.prev, a.next = b_prev, b_next
            b.prev, b.next = a_prev, a_next
        for node in (a, b):
            if node.prev is None:
                self.head = node
            else:
                node.prev.next = node
            if node.next is None:
                self.tail = node
            else:
                node.next.prev = node