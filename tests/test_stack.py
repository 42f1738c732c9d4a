import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoplay.stack import Stack, StackFullError


@given(st.lists(st.integers(), max_size=20))
def test_pop_returns_items_in_reverse_order(items):
    stack = Stack(len(items))
    for item in items:
        stack.push(item)
    popped = [stack.pop() for _ in items]
    assert popped == items[::-1]
    assert len(stack) == 0


def test_pop_empty_returns_none():
    assert Stack(2).pop() is None


def test_push_beyond_capacity_raises():
    stack = Stack(2)
    stack.push("a")
    stack.push("b")
    with pytest.raises(StackFullError):
        stack.push("c")
    assert len(stack) == 2


def test_zero_capacity_rejects_push():
    with pytest.raises(StackFullError):
        Stack(0).push(1)


def test_len_tracks_pushes_and_pops():
    stack = Stack(3)
    stack.push(1)
    stack.push(2)
    assert len(stack) == 2
    stack.pop()
    assert len(stack) == 1


def test_full_is_true_one_before_capacity():
    stack = Stack(3)
    stack.push(1)
    assert stack.full() is False
    stack.push(2)
    assert stack.full() is True


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)