import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoplay.string_problems import (
    divide,
    is_valid,
    length_of_longest_substring,
    longest_common_prefix,
    longest_valid_parentheses,
    reverse_integer,
    reverse_string,
)

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


def _balanced(steps):
    """Build a balanced bracket string from (pair, wrap) choices."""
    text = ""
    for pair, wrap in steps:
        opener, closer = pair
        text = opener + text + closer if wrap else text + opener + closer
    return text


_steps = st.lists(
    st.tuples(st.sampled_from(["()", "[]", "{}"]), st.booleans()), max_size=12
)


# longest_valid_parentheses

def test_longest_valid_parentheses_source_example():
    assert longest_valid_parentheses(")()())") == 4


def test_longest_valid_parentheses_empty():
    assert longest_valid_parentheses("") == 0


@pytest.mark.parametrize("k", [1, 2, 5, 10])
def test_longest_valid_parentheses_repeated_pairs(k):
    assert longest_valid_parentheses("()" * k) == 2 * k


@pytest.mark.parametrize("k", [1, 3, 7])
def test_longest_valid_parentheses_nested(k):
    assert longest_valid_parentheses("(" * k + ")" * k) == 2 * k


@pytest.mark.parametrize("k", [1, 4])
def test_longest_valid_parentheses_ignores_unmatched_ends(k):
    assert longest_valid_parentheses(")" + "()" * k + "(") == 2 * k


def test_longest_valid_parentheses_only_closing():
    assert longest_valid_parentheses(")))") == 0


@given(st.text(alphabet="()", max_size=40))
def test_longest_valid_parentheses_is_even(s):
    result = longest_valid_parentheses(s)
    assert result >= 0
    assert result % 2 == 0


# is_valid

def test_is_valid_source_example():
    assert is_valid("{[]}") is True


@pytest.mark.parametrize("s", ["(]", ")(", "(", "]", "a", "([)]", "(a)"])
def test_is_valid_rejects(s):
    assert is_valid(s) is False


def test_is_valid_empty():
    assert is_valid("") is True


@given(_steps)
def test_is_valid_accepts_balanced(steps):
    assert is_valid(_balanced(steps)) is True


@given(_steps)
def test_is_valid_rejects_extra_opener(steps):
    assert is_valid(_balanced(steps) + "(") is False


# length_of_longest_substring

def test_length_of_longest_substring_source_example():
    assert length_of_longest_substring("au") == len("au")


def test_length_of_longest_substring_empty():
    assert length_of_longest_substring("") == 0


def test_length_of_longest_substring_classic():
    assert length_of_longest_substring("abcabcbb") == 3


@pytest.mark.parametrize("n", [1, 2, 9])
def test_length_of_longest_substring_single_char(n):
    assert length_of_longest_substring("a" * n) == 1


@given(st.text(alphabet="abcdef", max_size=30))
def test_length_of_longest_substring_bounds(s):
    result = length_of_longest_substring(s)
    assert result <= len(set(s))
    assert (result >= 1) == bool(s)


@given(st.sets(st.characters(), max_size=20))
def test_length_of_longest_substring_distinct(chars):
    s = "".join(chars)
    assert length_of_longest_substring(s) == len(s)


# reverse_integer

def test_reverse_integer_zero():
    assert reverse_integer(0) == 0


def test_reverse_integer_overflow_gives_zero():
    assert reverse_integer(1534236469) == 0


def test_reverse_integer_trailing_zeros_dropped():
    assert reverse_integer(1200) == reverse_integer(12)


@given(st.integers(min_value=1, max_value=99999999).filter(lambda v: v % 10))
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


@given(st.integers(min_value=1, max_value=INT32_MAX))
def test_reverse_integer_sign(x):
    assert reverse_integer(-x) == -reverse_integer(x)


# divide

def test_divide_overflow_clamped():
    assert divide(INT32_MIN, -1) == INT32_MAX


@pytest.mark.parametrize("dividend, divisor", [(5, 0), (0, 5), (0, 0)])
def test_divide_zero_cases(dividend, divisor):
    assert divide(dividend, divisor) == 0


def test_divide_max_by_one():
    assert divide(INT32_MAX, 1) == INT32_MAX


@given(
    st.integers(min_value=INT32_MIN + 1, max_value=INT32_MAX),
    st.integers(min_value=-1000, max_value=1000).filter(bool),
)
def test_divide_truncates_toward_zero(dividend, divisor):
    quotient = divide(dividend, divisor)
    assert abs(quotient * divisor) <= abs(dividend)
    assert abs((abs(quotient) + 1) * divisor) > abs(dividend)
    if quotient:
        assert (quotient < 0) == ((dividend < 0) != (divisor < 0))


# longest_common_prefix

def test_longest_common_prefix_source_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_single():
    assert longest_common_prefix(["a"]) == "a"


def test_longest_common_prefix_empty_list():
    assert longest_common_prefix([]) == ""


def test_longest_common_prefix_no_common():
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


@given(st.lists(st.text(alphabet="ab", max_size=6), min_size=1, max_size=5))
def test_longest_common_prefix_is_prefix_of_all(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    longer = strs[0][: len(prefix) + 1]
    if len(longer) > len(prefix):
        assert not all(s.startswith(longer) for s in strs)


# reverse_string

def test_reverse_string_bytes():
    data = bytearray(b"hello")
    reverse_string(data)
    assert data == bytearray(b"hello"[::-1])


@given(st.lists(st.integers(), max_size=20))
def test_reverse_string_twice_is_identity(items):
    data = list(items)
    reverse_string(data)
    assert data == items[::-1]
    reverse_string(data)
    assert data == items