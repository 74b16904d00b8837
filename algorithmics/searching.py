"""Binary searches and related look-ups over sorted and rotated data."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two ascending sequences.

    Runs a binary search over the partition of the shorter sequence.
    """
    shorter, longer = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    m, n = len(shorter), len(longer)
    if m + n == 0:
        raise ValueError("median of two empty sequences")

    half = (m + n + 1) // 2
    low, high = 0, m
    while low <= high:
        cut_short = (low + high) // 2
        cut_long = half - cut_short
        left_short = shorter[cut_short - 1] if cut_short > 0 else float("-inf")
        right_short = shorter[cut_short] if cut_short < m else float("inf")
        left_long = longer[cut_long - 1] if cut_long > 0 else float("-inf")
        right_long = longer[cut_long] if cut_long < n else float("inf")

        if left_short <= right_long and left_long <= right_short:
            left_max = max(left_short, left_long)
            if (m + n) % 2:
                return float(left_max)
            return (left_max + min(right_short, right_long)) / 2.0
        if left_short > right_long:
            high = cut_short - 1
        else:
            low = cut_short + 1
    raise ValueError("inputs must be sorted in ascending order")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending sequence of distinct
    values, or -1 when it is absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[low]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if nums[mid] < target <= nums[high]:
                low = mid + 1
            else:
                high = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[first, last]`` indices of ``target`` in an ascending sequence,
    or ``[-1, -1]`` when it is absent."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read one after
    another, form one ascending sequence."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    total = len(matrix) * cols

    def cell(index: int) -> int:
        row, col = divmod(index, cols)
        return matrix[row][col]

    position = bisect_left(range(total), target, key=cell)
    return position < total and cell(position) == target


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` is in a rotated ascending sequence that may
    hold repeated values."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
            continue
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if nums[mid] <= target <= nums[high]:
                low = mid + 1
            else:
                high = mid - 1
    return False


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns are each
    ascending, walking from the top-right corner."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        element = matrix[row][col]
        if element == target:
            return True
        if element < target:
            row += 1
        else:
            col -= 1
    return False


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value among n+1 values drawn from 1..n.

    Treats the values as links between indices and finds the cycle entry.
    """
    if len(nums) < 2:
        raise ValueError("need at least two values")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    fast = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def full_bloom_flowers(
    flowers: Sequence[Sequence[int]], people: Sequence[int]
) -> list[int]:
    """For each arrival time, count flowers whose inclusive bloom interval
    contains it."""
    starts = sorted(start for start, _ in flowers)
    ends = sorted(end for _, end in flowers)
    return [bisect_right(starts, time) - bisect_left(ends, time) for time in people]


def min_operations_continuous(nums: Sequence[int]) -> int:
    """Return the fewest replacements that turn ``nums`` into distinct values
    forming one run of consecutive integers."""
    n = len(nums)
    unique = sorted(set(nums))
    return min(
        (
            n - (bisect_right(unique, start + n - 1) - index)
            for index, start in enumerate(unique)
        ),
        default=0,
    )