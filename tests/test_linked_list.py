import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import Node, SinglyLinkedList


def test_new_list_has_head_data():
    lst = SinglyLinkedList([1])
    assert lst.head.data == 1
    assert lst.head.next is None


def test_push_front_puts_latest_first():
    lst = SinglyLinkedList()
    lst.push_front(20)
    lst.push_front(10)
    assert lst.head.data == 10
    assert lst.head.next.data == 20
    assert list(lst) == [10, 20]


def test_append_puts_latest_last():
    lst = SinglyLinkedList()
    lst.append(10)
    lst.append(20)
    assert lst.head.next.data == 20
    assert list(lst) == [10, 20]


def test_pop_front_returns_head_and_empties():
    lst = SinglyLinkedList()
    lst.push_front(100)
    assert lst.pop_front() == 100
    assert len(lst) == 0
    assert lst.head is None


def test_pop_front_on_empty_raises():
    with pytest.raises(IndexError):
        SinglyLinkedList().pop_front()


def test_append_after_emptying_works():
    lst = SinglyLinkedList([5])
    lst.pop_front()
    lst.append(6)
    lst.append(7)
    assert list(lst) == [6, 7]


def test_node_links():
    tail = Node(2)
    head = Node(1, tail)
    assert head.next is tail


@given(st.lists(st.integers()))
def test_append_preserves_order(values):
    lst = SinglyLinkedList()
    for value in values:
        lst.append(value)
    assert list(lst) == values
    assert len(lst) == len(values)


@given(st.lists(st.integers()))
def test_push_front_reverses_order(values):
    lst = SinglyLinkedList()
    for value in values:
        lst.push_front(value)
    assert list(lst) == values[::-1]


@given(st.lists(st.integers(), min_size=1))
def test_pop_front_drains_in_order(values):
    lst = SinglyLinkedList(values)
    drained = [lst.pop_front() for _ in values]
    assert drained == values
    assert len(lst) == 0