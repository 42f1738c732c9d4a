"""Array problems: sums, intervals, medians and greedy packing."""

from __future__ import annotations

from typing import Iterable, Sequence

_MAX_INT32 = 2**31 - 1


def first_missing_positive(nums: Iterable[int]) -> int:
    """Return the smallest positive integer absent from ``nums``.

    Candidates are searched below the 32-bit signed maximum; 0 is returned
    if every one of them is present.
    """
    present = set(nums)
    for candidate in range(1, _MAX_INT32):
        if candidate not in present:
            return candidate
    return 0


def merge_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Merge two ascending sequences; on ties the item from ``nums1`` goes first."""
    result: list[int] = []
    i = j = 0
    while i < len(nums1) and j < len(nums2):
        if nums1[i] <= nums2[j]:
            result.append(nums1[i])
            i += 1
        else:
            result.append(nums2[j])
            j += 1
    result.extend(nums1[i:])
    result.extend(nums2[j:])
    return result


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two ascending sequences."""
    merged = merge_sorted(nums1, nums2)
    total = len(merged)
    if total == 0:
        raise ValueError("median of empty input")
    mid = total // 2
    if total % 2 == 0:
        return (merged[mid - 1] + merged[mid]) / 2
    return float(merged[mid])


def max_area(height: Sequence[int]) -> int:
    """Largest water area between two walls, found with two pointers."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        area = (right - left) * min(height[left], height[right])
        best = max(best, area)
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return all distinct triplets that sum to zero, in ascending order."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if first > 0:
            break
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, size - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                result.append([first, values[left], values[right]])
                while left < size - 1 and values[left] == values[left + 1]:
                    left += 1
                while right > 1 and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Return the sum of three values closest to ``target``; 0 if fewer than three."""
    values = sorted(nums)
    size = len(values)
    if size < 3:
        return 0
    result = values[-1] + values[-2] + values[-3]
    best_diff = abs(result - target)
    for i in range(size - 1):
        if i > 1 and values[i] == values[i - 1]:
            continue
        j, k = i + 1, size - 1
        if k == j:
            continue
        while j <= k - 1:
            total = values[i] + values[j] + values[k]
            diff = abs(total - target)
            if diff < best_diff:
                result, best_diff = total, diff
            if total <= target:
                j += 1
            else:
                k -= 1
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return all distinct quadruplets summing to ``target``, in ascending order."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    if size < 4:
        return result
    for i in range(size - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            k, last = j + 1, size - 1
            while k <= last - 1:
                total = values[i] + values[j] + values[k] + values[last]
                if total == target:
                    result.append([values[i], values[j], values[k], values[last]])
                    while k < size - 1 and values[k] == values[k + 1]:
                        k += 1
                    while last > 0 and values[last] == values[last - 1]:
                        last -= 1
                    k += 1
                    last -= 1
                elif total < target:
                    k += 1
                else:
                    last -= 1
    return result


def can_jump(nums: Sequence[int]) -> bool:
    """True if the last index can be reached from the first."""
    if not nums:
        raise ValueError("nums must not be empty")
    last = len(nums) - 1
    reach = nums[0]
    position = 0
    while position <= reach and position <= last:
        reach = max(reach, position + nums[position])
        position += 1
    return reach >= last


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals, ordered by start."""
    if not intervals:
        return []
    if len(intervals) == 1:
        return [list(intervals[0])]
    ordered = sorted(intervals, key=lambda interval: interval[0])
    pre_start, pre_end = ordered[0][0], ordered[0][1]
    result = [[pre_start, pre_end]]
    for start, end in (interval[:2] for interval in ordered[1:]):
        if pre_start <= start and end <= pre_end:
            continue
        if pre_start <= end and pre_end >= start:
            result[-1][1] = end
            pre_end = end
        else:
            result.append([start, end])
            pre_start, pre_end = start, end
    return result


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair of distinct positions summing to ``target``."""
    for i, first in enumerate(nums):
        for j, second in enumerate(nums):
            if j != i and first + second == target:
                return [i, j]
    return []


def maximum_units(box_types: Iterable[Sequence[int]], truck_size: int) -> int:
    """Most units a truck holding ``truck_size`` boxes can carry.

    Each entry of ``box_types`` is ``[number_of_boxes, units_per_box]``.
    """
    counts: dict[int, int] = {}
    for boxes, units in box_types:
        counts[units] = counts.get(units, 0) + boxes
    remaining = truck_size
    total = 0
    for units in sorted(counts, reverse=True):
        if remaining <= 0:
            break
        take = min(counts[units], remaining)
        if take > 0:
            total += take * units
            remaining -= take
    return total