"""Dynamic-programming problems: paths, stairs, robberies and palindromes."""

from __future__ import annotations

from typing import Sequence


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum through a number triangle.

    From index ``j`` of a row a path may step to index ``j`` or ``j + 1``
    of the next row. An empty triangle gives 0.
    """
    if not triangle:
        return 0
    previous = [triangle[0][0]]
    for row in triangle[1:]:
        current: list[int] = []
        for j, value in enumerate(row):
            above = previous[j] if j < len(previous) else 0
            above_left = previous[j - 1] if 0 <= j - 1 < len(previous) else 0
            if j == 0:
                current.append(value + above)
            elif j >= len(previous):
                current.append(value + above_left)
            else:
                current.append(value + min(above, above_left))
        previous = current
    return min(previous)


def rob(nums: Sequence[int]) -> int:
    """Most money taken from houses in a row without robbing two neighbours."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums[0], nums[1])
    totals = [nums[0], nums[1]]
    best_before = totals[0]
    for i in range(2, len(nums)):
        best_before = max(best_before, totals[i - 2])
        totals.append(best_before + nums[i])
    return max(totals)


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid.

    A zero dimension gives the other dimension.
    """
    if m < 0 or n < 0:
        raise ValueError("grid dimensions must not be negative")
    if m == 0:
        return n
    if n == 0:
        return m
    row = [1] * n
    for _ in range(1, m):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths across a grid where cells holding 1 are blocked."""
    if not grid:
        return 0
    if grid[0][0] == 1:
        return 0
    width = len(grid[0])
    row = [0] * width
    row[0] = 1
    for cells in grid:
        for j in range(width):
            if cells[j] == 1:
                row[j] = 0
            elif j > 0:
                row[j] += row[j - 1]
    return row[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right."""
    if not grid:
        return 0
    row: list[int] = []
    for i, cells in enumerate(grid):
        if i == 0:
            running = 0
            for value in cells:
                running += value
                row.append(running)
            continue
        for j, value in enumerate(cells):
            if j == 0:
                row[j] += value
            else:
                row[j] = min(row[j], row[j - 1]) + value
    return row[-1]


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring of ``s``.

    Among several of the greatest length, the one starting furthest right
    is returned.
    """
    best_length, best_start = 0, 0
    size = len(s)
    for center in range(2 * size - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < size and s[left] == s[right]:
            left -= 1
            right += 1
        length, start = right - left - 1, left + 1
        if (length, start) > (best_length, best_start):
            best_length, best_start = length, start
    return s[best_start:best_start + best_length]


def tribonacci(n: int) -> int:
    """The ``n``-th tribonacci number, with T0 = 0 and T1 = T2 = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from buying once and selling later; 0 if none is possible."""
    if len(prices) < 2:
        return 0
    best = 0
    lowest = prices[0]
    for price in prices:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n < 1:
        raise ValueError("n must be at least 1")
    one_back, two_back = 1, 1
    for _ in range(1, n):
        one_back, two_back = one_back + two_back, one_back
    return one_back


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way to the top when each step's cost is paid on leaving it.

    The climb may start on step 0 or step 1. A single step costs its own
    price; no steps cost nothing.
    """
    if not cost:
        return 0
    if len(cost) == 1:
        return cost[0]
    two_back, one_back = cost[0], cost[1]
    for price in cost[2:]:
        two_back, one_back = one_back, min(two_back, one_back) + price
    return min(two_back, one_back)