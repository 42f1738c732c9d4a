import pytest
from hypothesis import given, settings, strategies as st

from algoplay.coordination import fan_out, ping_pong, take_turns, threaded_sum


def test_take_turns_abc():
    assert take_turns(["A", "B", "C"], 5) == ["A", "B", "C"] * 5


def test_take_turns_default_rounds():
    result = take_turns("XY")
    assert result == ["X", "Y"] * 5


def test_take_turns_empty_and_zero():
    assert take_turns([], 3) == []
    assert take_turns(["A", "B"], 0) == []


def test_take_turns_negative_rounds():
    with pytest.raises(ValueError):
        take_turns(["A"], -1)


def test_fan_out_delivers_every_item_once():
    handled = fan_out(range(100))
    assert sorted(item for _, item in handled) == list(range(100))
    assert all(0 <= worker < 4 for worker, _ in handled)


def test_fan_out_single_worker_keeps_order():
    handled = fan_out(["a", "b", "c"], workers=1)
    assert handled == [(0, "a"), (0, "b"), (0, "c")]


def test_fan_out_rejects_no_workers():
    with pytest.raises(ValueError):
        fan_out([1, 2], workers=0)


def test_threaded_sum_default():
    assert threaded_sum() == sum(range(100))


@settings(max_examples=20, deadline=None)
@given(st.integers(min_value=0, max_value=8), st.integers(min_value=0, max_value=8))
def test_threaded_sum_matches_range(workers, chunk):
    assert threaded_sum(workers, chunk) == sum(range(workers * chunk))


def test_threaded_sum_negative_raises():
    with pytest.raises(ValueError):
        threaded_sum(-1, 10)


def test_ping_pong_counts_and_alternates():
    result = ping_pong(100)
    assert [count for _, count in result] == list(range(1, 101))
    assert all(worker == (count - 1) % 2 for worker, count in result)


def test_ping_pong_zero_limit():
    assert ping_pong(0) == []