"""String and integer problems: brackets, substrings, reversal and division."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from algoplay.stack import Stack

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring of ``s``.

    Any character other than ``(`` is treated as a closing bracket.
    """
    stack = Stack(len(s))
    lengths = [0] * len(s)
    best = 0
    after_close = False
    for i, char in enumerate(s):
        if char == "(":
            stack.push(char)
            after_close = False
            continue
        if stack.pop() == "(":
            back = i - 1 if after_close else i - 2
            current = (lengths[back] if back >= 0 else 0) + 2
            if i - current > 0:
                current += lengths[i - current]
        else:
            current = 0
        lengths[i] = current
        best = max(best, current)
        after_close = True
    return best


def is_valid(s: str) -> bool:
    """True if every bracket in ``s`` is closed by its partner in order.

    Characters that are not opening brackets must close the innermost
    open bracket, so any other character makes the string invalid.
    """
    open_brackets: list[str] = []
    for char in s:
        if char in _OPENERS:
            open_brackets.append(char)
            continue
        if not open_brackets or _PAIRS.get(char) != open_brackets[-1]:
            return False
        open_brackets.pop()
    return not open_brackets


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring of ``s`` without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for i, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = i
        best = max(best, i - start + 1)
    return best


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result falls outside the 32-bit signed range.
    """
    digits = str(abs(x))[::-1]
    result = int(digits)
    if x < 0:
        result = -result
    if result > _INT32_MAX or result < _INT32_MIN:
        return 0
    return result


def divide(dividend: int, divisor: int) -> int:
    """Truncated integer quotient computed by shifting and subtraction.

    A zero divisor or dividend gives 0; the one 32-bit overflow case,
    the minimum value divided by -1, is clamped to the 32-bit maximum.
    """
    if divisor == 0 or dividend == 0:
        return 0
    if dividend == _INT32_MIN and divisor == -1:
        return _INT32_MAX
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        chunk, count = step, 1
        while (chunk << 1) <= remaining:
            chunk <<= 1
            count <<= 1
        remaining -= chunk
        quotient += count
    return -quotient if negative else quotient


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string in ``strs``; empty if none."""
    if not strs:
        return ""
    first, rest = strs[0], strs[1:]
    common = ""
    for end in range(1, len(first) + 1):
        prefix = first[:end]
        if not all(other.startswith(prefix) for other in rest):
            break
        common = prefix
    return common


def reverse_string(chars: MutableSequence) -> None:
    """Reverse a mutable sequence such as a bytearray or list in place."""
    chars.reverse()