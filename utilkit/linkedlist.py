"""Intrusive doubly and singly linked lists.

The lists link caller-owned node objects together rather than copying
values, so a node can be removed or re-linked in constant time.
"""

from __future__ import annotations

from typing import Any, Iterator


class Node:
    """A node of a :class:`DoublyLinkedList`, carrying an optional value."""

    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: Node | None = None
        self.prev: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def check_links(first: Node | None, last: Node | None) -> bool:
    """Check that ``first`` .. ``last`` form a consistently linked chain.

    The chain is walked from both ends towards the middle; every step must
    agree with the links seen on the way.
    """
    if first is None or last is None:
        return False
    if first is last:
        return True

    p1: Node | None = first
    p2: Node | None = last
    p1_prev = first.prev
    p2_next = last.next
    while (
        p1 is not None
        and p2 is not None
        and p1 is not p2
        and p1.next is not p2.prev
        and p1.prev is p1_prev
        and p2.next is p2_next
    ):
        p1_prev = p1
        p1 = p1.next
        p2_next = p2
        p2 = p2.prev

    if p1 is None or p2 is None:
        return False
    return p1 is p2 or p1.next is p2.prev


class DoublyLinkedList:
    """A list of :class:`Node` objects linked in both directions."""

    def __init__(self) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, node: Node) -> None:
        """Link ``node`` at the tail."""
        node.prev = self.tail
        node.next = None
        if self.tail is not None:
            self.tail.next = node
        self.tail = node
        if self.head is None:
            self.head = node

    def appendleft(self, node: Node) -> None:
        """Link ``node`` at the head."""
        node.prev = None
        node.next = self.head
        if self.head is not None:
            self.head.prev = node
        self.head = node
        if self.tail is None:
            self.tail = node

    def pop(self) -> Node:
        """Unlink and return the tail node; IndexError when empty."""
        node = self.tail
        if node is None:
            raise IndexError("pop from an empty list")
        self.tail = node.prev
        if self.tail is not None:
            self.tail.next = None
        else:
            self.head = None
        return node

    def popleft(self) -> Node:
        """Unlink and return the head node; IndexError when empty."""
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is not None:
            self.head.prev = None
        else:
            self.tail = None
        return node

    def remove_node(self, node: Node) -> None:
        """Unlink ``node``, which must be part of this list."""
        if node.prev is None:
            self.head = node.next
            if self.head is None:
                self.tail = None
            else:
                self.head.prev = None
        elif node.next is None:
            self.tail = node.prev
            self.tail.next = None
        else:
            node.next.prev = node.prev
            node.prev.next = node.next

    def find_node(self, node: Node) -> Node | None:
        """Return ``node`` if it is in this list, else None."""
        return next((p for p in self if p is node), None)

    def remove_nodes(self, start: Node, end: Node) -> None:
        """Unlink the run ``start`` .. ``end``.

        Raises ValueError when ``start`` is not in the list or the run is
        not a consistently linked chain.
        """
        if self.find_node(start) is None or not check_links(start, end):
            raise ValueError("start..end is not a run of this list")

        if start.prev is None:
            self.head = end.next
            if self.head is None:
                self.tail = None
            else:
                self.head.prev = None
        elif end.next is None:
            start.prev.next = None
            self.tail = start.prev
        else:
            start.prev.next = end.next
            end.next.prev = start.prev

    def insert_node(self, after: Node | None, node: Node) -> None:
        """Link ``node`` after ``after``, or at the head when ``after`` is None."""
        if after is None:
            following = self.head
            self.head = node
        else:
            following = after.next
            after.next = node
        node.prev = after
        node.next = following
        if following is not None:
            following.prev = node
        else:
            self.tail = node

    def insert_nodes(self, after: Node | None, start: Node, end: Node) -> None:
        """Link the chain ``start`` .. ``end`` after ``after``.

        With ``after`` None the chain is prepended. Raises ValueError when
        the chain is not consistently linked.
        """
        if not check_links(start, end):
            raise ValueError("start..end is not a linked chain")

        if self.head is None:
            self.head = start
            self.tail = end
        elif after is None:
            end.next = self.head
            self.head.prev = end
            self.head = start
            start.prev = None
        else:
            following = after.next
            after.next = start
            start.prev = after
            end.next = following
            if following is not None:
                following.prev = end
            else:
                self.tail = end


class SNode:
    """A node of a :class:`SinglyLinkedList`, carrying an optional value."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: SNode | None = None

    def __repr__(self) -> str:
        return f"SNode({self.value!r})"


class SinglyLinkedList:
    """A list of :class:`SNode` objects linked forward only."""

    def __init__(self) -> None:
        self.head: SNode | None = None

    def __iter__(self) -> Iterator[SNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, node: SNode, after: SNode | None = None) -> None:
        """Link ``node`` at the end, walking from ``after`` (or the head)."""
        p = after if after is not None else self.head
        if p is None:
            self.head = node
        else:
            while p.next is not None:
                p = p.next
            p.next = node
        node.next = None

    def appendleft(self, node: SNode) -> None:
        """Link ``node`` at the head."""
        node.next = self.head
        self.head = node

    def pop(self, after: SNode | None = None) -> SNode:
        """Unlink and return the last node, walking from ``after`` (or the head).

        Raises IndexError when the list is empty or nothing follows ``after``.
        """
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            node = self.head
            self.head = None
            return node
        n1 = after if after is not None else self.head
        n2 = n1.next
        if n2 is None:
            raise IndexError("no node follows the given node")
        while n2.next is not None:
            n1 = n2
            n2 = n2.next
        n1.next = None
        return n2

    def popleft(self) -> SNode:
        """Unlink and return the head node; IndexError when empty."""
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        return node

    def remove_node(self, node: SNode) -> None:
        """Unlink ``node``; ValueError when it is not in the list."""
        prev: SNode | None = None
        cur = self.head
        while cur is not None and cur is not node:
            prev = cur
            cur = cur.next
        if cur is None:
            raise ValueError("node is not in the list")
        if prev is None:
            self.head = cur.next
        else:
            prev.next = cur.next

    def insert_node(self, after: SNode | None, node: SNode) -> None:
        """Link ``node`` after ``after``, or at the head when ``after`` is None."""
        if after is None:
            node.next = self.head
            self.head = node
        else:
            node.next = after.next
            after.next = node