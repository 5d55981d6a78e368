import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stacks import ArrayStack, LinkedStack, StackOverflow, StackUnderflow


def test_array_stack_top_after_pushes():
    stack = ArrayStack()
    stack.push(10)
    stack.push(20)
    assert stack.peek() == 20
    assert len(stack) == 2


def test_array_stack_overflow_at_capacity():
    stack = ArrayStack(capacity=5)
    for value in range(5):
        stack.push(value)
    with pytest.raises(StackOverflow):
        stack.push(99)
    assert len(stack) == 5


def test_array_stack_pop_returns_top():
    stack = ArrayStack(capacity=5, values=[10, 20, 30])
    assert stack.pop() == 30
    assert stack.peek() == 20


def test_array_stack_underflow():
    stack = ArrayStack()
    with pytest.raises(StackUnderflow):
        stack.pop()
    with pytest.raises(StackUnderflow):
        stack.peek()


def test_array_stack_display():
    stack = ArrayStack(capacity=5, values=[10, 20, 30])
    assert stack.display() == "Stack: 30 20 10"
    assert ArrayStack().display() == "Stack is empty"


def test_array_stack_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(capacity=-1)


def test_linked_stack_top():
    stack = LinkedStack()
    stack.push(10)
    stack.push(20)
    assert stack.peek() == 20
    assert list(stack) == [20, 10]


def test_linked_stack_underflow():
    with pytest.raises(StackUnderflow):
        LinkedStack().pop()
    with pytest.raises(StackUnderflow):
        LinkedStack().peek()


@given(st.lists(st.integers(), max_size=10))
def test_array_stack_is_lifo(values):
    stack = ArrayStack(values=values)
    assert list(stack) == values[::-1]
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


@given(st.lists(st.integers()))
def test_linked_stack_is_lifo(values):
    stack = LinkedStack(values)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0