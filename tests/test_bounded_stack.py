import copy

import pytest

from algokit.bounded_stack import DEFAULT_CAPACITY, BoundedStack


def test_default_capacity_matches_constant():
    stack = BoundedStack()
    assert stack.capacity == DEFAULT_CAPACITY == 20


def test_pop_returns_items_in_reverse_order():
    stack = BoundedStack(5)
    for value in ["a", "b", "c"]:
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert stack.is_empty()


def test_top_leaves_item_in_place():
    stack = BoundedStack(3)
    stack.push(7)
    assert stack.top() == 7
    assert len(stack) == 1


def test_push_beyond_capacity_raises():
    stack = BoundedStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_pop_on_empty_stack_raises():
    stack = BoundedStack(3)
    with pytest.raises(IndexError):
        stack.pop()
    assert len(stack) == 0


def test_top_on_empty_stack_raises():
    stack = BoundedStack(3)
    with pytest.raises(IndexError):
        stack.top()
    assert stack.is_empty()


def test_zero_capacity_is_both_empty_and_full():
    stack = BoundedStack(0)
    assert stack.is_empty() and stack.is_full()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_copy_is_independent():
    stack = BoundedStack(4)
    stack.push(1)
    stack.push(2)
    duplicate = copy.copy(stack)
    duplicate.push(3)
    assert list(stack) == [2, 1]
    assert list(duplicate) == [3, 2, 1]
    assert duplicate.capacity == stack.capacity