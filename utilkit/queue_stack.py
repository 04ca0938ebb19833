"""A FIFO queue and a LIFO stack built on the intrusive linked lists."""

from __future__ import annotations

from utilkit.linkedlist import DoublyLinkedList, Node, SinglyLinkedList, SNode


class Queue:
    """First-in first-out queue of :class:`Node` objects."""

    def __init__(self) -> None:
        self._list = DoublyLinkedList()

    def enqueue(self, node: Node) -> None:
        """Add ``node`` at the back."""
        self._list.append(node)

    def dequeue(self) -> Node:
        """Remove and return the front node; IndexError when empty."""
        try:
            return self._list.popleft()
        except IndexError:
            raise IndexError("dequeue from an empty queue") from None

    def peek_first(self) -> Node:
        """Return the front node without removing it; IndexError when empty."""
        if self._list.head is None:
            raise IndexError("peek into an empty queue")
        return self._list.head

    def peek_last(self) -> Node:
        """Return the back node without removing it; IndexError when empty."""
        if self._list.tail is None:
            raise IndexError("peek into an empty queue")
        return self._list.tail


class Stack:
    """Last-in first-out stack of :class:`SNode` objects."""

    def __init__(self) -> None:
        self._list = SinglyLinkedList()

    def push(self, node: SNode) -> None:
        """Put ``node`` on top."""
        self._list.appendleft(node)

    def pop(self) -> SNode:
        """Remove and return the top node; IndexError when empty."""
        try:
            return self._list.popleft()
        except IndexError:
            raise IndexError("pop from an empty stack") from None

    def top(self) -> SNode:
        """Return the top node without removing it; IndexError when empty."""
        if self._list.head is None:
            raise IndexError("empty stack has no top")
        return self._list.head