import pytest
from hypothesis import given, strategies as st

from algobox.stack import ArrayStack, LinkedStack, StackEmptyError, StackFullError


@given(st.lists(st.integers(), max_size=10))
def test_array_stack_is_lifo(values):
    stack = ArrayStack(10)
    for value in values:
        stack.push(value)
    assert list(stack) == values
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_array_stack_default_capacity():
    stack = ArrayStack()
    for value in range(10):
        stack.push(value)
    with pytest.raises(StackFullError):
        stack.push(10)
    assert len(stack) == 10


def test_array_stack_full_at_capacity():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackFullError):
        stack.push(3)
    assert list(stack) == [1, 2]


def test_array_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(0)


def test_array_stack_empty_errors():
    stack = ArrayStack(3)
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()
    with pytest.raises(StackEmptyError):
        stack.change(0, 1)


def test_empty_error_is_an_index_error():
    with pytest.raises(IndexError):
        ArrayStack(1).pop()


def test_array_stack_peek_does_not_remove():
    stack = ArrayStack(3)
    stack.push(4)
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 2


def test_array_stack_change():
    stack = ArrayStack(5)
    for value in (1, 2, 3):
        stack.push(value)
    stack.change(1, 20)
    assert list(stack) == [1, 20, 3]
    with pytest.raises(IndexError):
        stack.change(3, 9)
    with pytest.raises(IndexError):
        stack.change(-1, 9)


@given(st.lists(st.integers(), max_size=30))
def test_linked_stack_is_lifo(values):
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    assert list(stack) == values[::-1]
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_linked_stack_empty_pop():
    stack = LinkedStack()
    with pytest.raises(StackEmptyError):
        stack.pop()
    stack.push(5)
    assert stack.pop() == 5
    with pytest.raises(StackEmptyError):
        stack.pop()