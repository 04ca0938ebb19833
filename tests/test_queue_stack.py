import pytest

from utilkit.linkedlist import Node, SNode
from utilkit.queue_stack import Queue, Stack


def test_queue_is_fifo():
    queue = Queue()
    nodes = [Node(v) for v in range(4)]
    for node in nodes:
        queue.enqueue(node)
    assert [queue.dequeue() for _ in nodes] == nodes


def test_queue_peek_does_not_remove():
    queue = Queue()
    first, last = Node("first"), Node("last")
    queue.enqueue(first)
    queue.enqueue(last)
    assert queue.peek_first() is first
    assert queue.peek_last() is last
    assert queue.dequeue() is first
    assert queue.peek_first() is last


def test_queue_empty_raises():
    queue = Queue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek_first()
    with pytest.raises(IndexError):
        queue.peek_last()


def test_queue_reusable_after_draining():
    queue = Queue()
    node = Node(1)
    queue.enqueue(node)
    assert queue.dequeue() is node
    queue.enqueue(node)
    assert queue.peek_last() is node


def test_stack_is_lifo():
    stack = Stack()
    nodes = [SNode(v) for v in range(4)]
    for node in nodes:
        stack.push(node)
    assert [stack.pop() for _ in nodes] == nodes[::-1]


def test_stack_top_does_not_remove():
    stack = Stack()
    bottom, top = SNode("bottom"), SNode("top")
    stack.push(bottom)
    stack.push(top)
    assert stack.top() is top
    assert stack.pop() is top
    assert stack.top() is bottom


def test_stack_empty_raises():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()