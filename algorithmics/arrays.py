"""Algorithms over integer sequences and small matrices."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from itertools import accumulate, islice, pairwise, takewhile
from typing import Sequence


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children standing in a row.

    Every child gets at least one, and a child rated higher than a neighbour
    gets more than that neighbour.
    """
    if len(ratings) <= 1:
        return len(ratings)
    from_left = [1]
    for prev, cur in pairwise(ratings):
        from_left.append(from_left[-1] + 1 if cur > prev else 1)
    from_right = [1]
    for nxt, cur in pairwise(reversed(ratings)):
        from_right.append(from_right[-1] + 1 if cur > nxt else 1)
    return sum(map(max, from_left, reversed(from_right)))


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of values")
    window: deque[int] = deque()
    maxima: list[int] = []
    for index, value in enumerate(nums):
        while window and window[0] <= index - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(index)
        if index >= k - 1:
            maxima.append(nums[window[0]])
    return maxima


def h_index(citations: Sequence[int]) -> int:
    """Return the largest ``h`` such that ``h`` papers have at least ``h``
    citations each."""
    n = len(citations)
    return max(
        (n - rank for rank, cited in enumerate(sorted(citations)) if cited >= n - rank),
        default=0,
    )


def find132pattern(nums: Sequence[int]) -> bool:
    """Tell whether some ``i < j < k`` has ``nums[i] < nums[k] < nums[j]``."""
    if len(nums) < 3:
        return False
    prefix_min = list(accumulate(nums, min))
    candidates: list[int] = []
    for value, low in zip(reversed(nums[1:]), reversed(prefix_min[1:])):
        if value <= low:
            continue
        while candidates and candidates[-1] <= low:
            candidates.pop()
        if candidates and candidates[-1] < value:
            return True
        candidates.append(value)
    return False


def is_monotonic(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is entirely non-decreasing or non-increasing."""
    pairs = list(pairwise(nums))
    return all(a <= b for a, b in pairs) or all(a >= b for a, b in pairs)


def sort_array_by_parity(nums: Sequence[int]) -> list[int]:
    """Return a copy of ``nums`` with even values moved ahead of odd ones.

    Odd values found from the front are swapped with even values found from
    the back.
    """
    result = list(nums)
    front, back = 0, len(result) - 1
    while front < back:
        if result[front] % 2 == 0:
            front += 1
        elif result[back] % 2 == 0:
            result[front], result[back] = result[back], result[front]
            front += 1
            back -= 1
        else:
            back -= 1
    return result


def group_the_people(group_sizes: Sequence[int]) -> list[list[int]]:
    """Split people into groups whose size matches each member's entry.

    Groups come in order of size, members in order of index.
    """
    by_size: defaultdict[int, list[int]] = defaultdict(list)
    for person, size in enumerate(group_sizes):
        if size < 1:
            raise ValueError(f"group size {size} must be positive")
        by_size[size].append(person)
    groups: list[list[int]] = []
    for size in sorted(by_size):
        members = by_size[size]
        if len(members) % size:
            raise ValueError(f"{len(members)} people cannot form groups of {size}")
        people = iter(members)
        groups.extend(list(islice(people, size)) for _ in range(len(members) // size))
    return groups


def k_weakest_rows(mat: Sequence[Sequence[int]], k: int) -> list[int]:
    """Return the indices of the ``k`` rows with the fewest leading ones,
    ties going to the lower index."""
    if not 0 <= k <= len(mat):
        raise ValueError("k must be between 0 and the number of rows")
    strength = [
        (sum(1 for _ in takewhile(lambda cell: cell == 1, row)), index)
        for index, row in enumerate(mat)
    ]
    return [index for _, index in sorted(strength)[:k]]


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Count index pairs ``i < j`` with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def minimum_replacement(nums: Sequence[int]) -> int:
    """Return the fewest splits of a value into two summing parts that make
    ``nums`` non-decreasing."""
    if any(value < 1 for value in nums):
        raise ValueError("values must be positive")
    if all(a <= b for a, b in pairwise(nums)):
        return 0
    operations = 0
    limit = nums[-1]
    for value in reversed(nums[:-1]):
        if value > limit:
            parts = -(-value // limit)
            operations += parts - 1
            limit = value // parts
        else:
            limit = value
    return operations


def largest_local(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the maximum of every 3-by-3 block of a square grid."""
    n = len(grid)
    if n < 3:
        raise ValueError("grid must be at least 3 by 3")
    return [
        [max(max(row[j : j + 3]) for row in grid[i : i + 3]) for j in range(n - 2)]
        for i in range(n - 2)
    ]


def best_closing_time(customers: str) -> int:
    """Return the earliest hour to close with the least penalty.

    Each open hour without a customer (``N``) and each closed hour with one
    (``Y``) costs one.
    """
    penalty = customers.count("Y")
    best, best_hour = penalty, 0
    for hour, mark in enumerate(customers, start=1):
        penalty += -1 if mark == "Y" else 1
        if penalty < best:
            best, best_hour = penalty, hour
    return best_hour


def matrix_score(grid: Sequence[Sequence[int]]) -> int:
    """Return the highest sum of rows read as binary numbers after toggling
    any rows and columns."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows = [list(row) if row[0] else [1 - bit for bit in row] for row in grid]
    height, width = len(rows), len(rows[0])
    score = 0
    for col, column in enumerate(zip(*rows)):
        ones = sum(column)
        if ones < (height + 1) // 2:
            ones = height - ones
        score += ones << (width - 1 - col)
    return score