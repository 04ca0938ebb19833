import pytest

from utilkit.linkedlist import (
    DoublyLinkedList,
    Node,
    SinglyLinkedList,
    SNode,
    check_links,
)


def make_list(values):
    lst = DoublyLinkedList()
    nodes = [Node(v) for v in values]
    for node in nodes:
        lst.append(node)
    return lst, nodes


def values(lst):
    return [node.value for node in lst]


def backwards(lst):
    out = []
    node = lst.tail
    while node is not None:
        out.append(node.value)
        node = node.prev
    return out


def chain(values_):
    nodes = [Node(v) for v in values_]
    for a, b in zip(nodes, nodes[1:]):
        a.next = b
        b.prev = a
    return nodes


def test_append_and_appendleft_order():
    lst = DoublyLinkedList()
    lst.append(Node(2))
    lst.append(Node(3))
    lst.appendleft(Node(1))
    assert values(lst) == [1, 2, 3]
    assert backwards(lst) == [3, 2, 1]


def test_pop_and_popleft():
    lst, nodes = make_list([1, 2, 3])
    assert lst.pop() is nodes[2]
    assert lst.popleft() is nodes[0]
    assert values(lst) == [2]
    assert lst.pop() is nodes[1]
    assert lst.head is None and lst.tail is None


def test_pop_empty_raises():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.pop()
    with pytest.raises(IndexError):
        lst.popleft()


@pytest.mark.parametrize("index, expected", [(0, [2, 3]), (1, [1, 3]), (2, [1, 2])])
def test_remove_node(index, expected):
    lst, nodes = make_list([1, 2, 3])
    lst.remove_node(nodes[index])
    assert values(lst) == expected
    assert backwards(lst) == expected[::-1]


def test_remove_only_node_empties_list():
    lst, nodes = make_list(["x"])
    lst.remove_node(nodes[0])
    assert lst.head is None and lst.tail is None


def test_find_node():
    lst, nodes = make_list([1, 2])
    assert lst.find_node(nodes[1]) is nodes[1]
    assert lst.find_node(Node(1)) is None


def test_check_links_single_and_chains():
    a = Node()
    assert check_links(a, a) is True
    assert check_links(None, a) is False
    for size in (2, 3, 4, 5):
        nodes = chain(range(size))
        assert check_links(nodes[0], nodes[-1]) is True


def test_check_links_broken_chain():
    nodes = chain(range(3))
    nodes[2].prev = None
    assert check_links(nodes[0], nodes[2]) is False


def test_remove_nodes_middle():
    lst, nodes = make_list(range(5))
    lst.remove_nodes(nodes[1], nodes[3])
    assert values(lst) == [0, 4]
    assert backwards(lst) == [4, 0]


def test_remove_nodes_head_and_tail():
    lst, nodes = make_list(range(5))
    lst.remove_nodes(nodes[0], nodes[2])
    assert values(lst) == [3, 4]
    lst.remove_nodes(nodes[3], nodes[4])
    assert values(lst) == []


def test_remove_nodes_up_to_tail():
    lst, nodes = make_list(range(5))
    lst.remove_nodes(nodes[2], nodes[4])
    assert values(lst) == [0, 1]
    assert lst.tail is nodes[1]


def test_remove_nodes_foreign_start_raises():
    lst, _ = make_list(range(3))
    other = chain(range(3))
    with pytest.raises(ValueError):
        lst.remove_nodes(other[0], other[2])


def test_insert_node():
    lst, nodes = make_list([1, 3])
    lst.insert_node(nodes[0], Node(2))
    lst.insert_node(None, Node(0))
    lst.insert_node(nodes[1], Node(4))
    assert values(lst) == [0, 1, 2, 3, 4]
    assert backwards(lst) == [4, 3, 2, 1, 0]


def test_insert_node_into_empty_list():
    lst = DoublyLinkedList()
    node = Node("only")
    lst.insert_node(None, node)
    assert lst.head is node and lst.tail is node


def test_insert_nodes_after():
    lst, nodes = make_list(["a", "d"])
    run = chain(["b", "c"])
    lst.insert_nodes(nodes[0], run[0], run[-1])
    assert values(lst) == ["a", "b", "c", "d"]
    assert backwards(lst) == ["d", "c", "b", "a"]


def test_insert_nodes_at_tail_and_head():
    lst, nodes = make_list(["m"])
    tail_run = chain(["x", "y"])
    lst.insert_nodes(nodes[0], tail_run[0], tail_run[-1])
    head_run = chain(["a", "b"])
    lst.insert_nodes(None, head_run[0], head_run[-1])
    assert values(lst) == ["a", "b", "m", "x", "y"]
    assert backwards(lst) == ["y", "x", "m", "b", "a"]


def test_insert_nodes_into_empty_list():
    lst = DoublyLinkedList()
    run = chain([1, 2, 3])
    lst.insert_nodes(None, run[0], run[-1])
    assert values(lst) == [1, 2, 3]
    assert lst.tail is run[-1]


def svalues(lst):
    return [node.value for node in lst]


def test_slist_append_appendleft():
    lst = SinglyLinkedList()
    lst.append(SNode(2))
    lst.append(SNode(3))
    lst.appendleft(SNode(1))
    assert svalues(lst) == [1, 2, 3]


def test_slist_append_after_walks_to_end():
    lst = SinglyLinkedList()
    first = SNode(1)
    lst.append(first)
    lst.append(SNode(2))
    lst.append(SNode(3), after=first)
    assert svalues(lst) == [1, 2, 3]


def test_slist_pop_and_popleft():
    lst = SinglyLinkedList()
    nodes = [SNode(v) for v in range(3)]
    for node in nodes:
        lst.append(node)
    assert lst.pop() is nodes[2]
    assert lst.popleft() is nodes[0]
    assert lst.pop() is nodes[1]
    assert lst.head is None
    with pytest.raises(IndexError):
        lst.pop()
    with pytest.raises(IndexError):
        lst.popleft()


def test_slist_pop_after_last_raises():
    lst = SinglyLinkedList()
    nodes = [SNode(v) for v in range(2)]
    for node in nodes:
        lst.append(node)
    with pytest.raises(IndexError):
        lst.pop(after=nodes[1])
    assert svalues(lst) == [0, 1]


def test_slist_remove_node():
    lst = SinglyLinkedList()
    nodes = [SNode(v) for v in range(3)]
    for node in nodes:
        lst.append(node)
    lst.remove_node(nodes[1])
    assert svalues(lst) == [0, 2]
    lst.remove_node(nodes[0])
    assert svalues(lst) == [2]
    with pytest.raises(ValueError):
        lst.remove_node(nodes[1])


def test_slist_insert_node():
    lst = SinglyLinkedList()
    mid = SNode(2)
    lst.append(mid)
    lst.insert_node(None, SNode(1))
    lst.insert_node(mid, SNode(3))
    assert svalues(lst) == [1, 2, 3]