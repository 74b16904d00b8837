"""Counting and optimisation problems solved by dynamic programming."""

from __future__ import annotations

from typing import Iterable, Sequence

MOD = 1_000_000_007


def unique_paths(m: int, n: int) -> int:
    """Count monotone right/down paths across an ``m``-by-``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(1, m):
        for col in range(1, n):
            row[col] += row[col - 1]
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths from the top-left to the bottom-right cell that
    avoid cells marked 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    if grid[0][0] == 1:
        return 0
    ways = [0] * len(grid[0])
    ways[0] = 1
    for r, cells in enumerate(grid):
        for c, blocked in enumerate(cells):
            if blocked:
                ways[c] = 0
            elif c > 0:
                ways[c] += ways[c - 1]
            elif r > 0 and grid[r - 1][0]:
                ways[c] = 0
    return ways[-1]


def num_trees(n: int) -> int:
    """Count the structurally distinct binary search trees holding 1..n."""
    counts = [1, 1]
    for size in range(2, n + 1):
        counts.append(sum(counts[root - 1] * counts[size - root] for root in range(1, size + 1)))
    return counts[max(n, 0)] if n >= 0 else 1


def is_interleave(s1: str, s2: str, s3: str) -> bool:
    """Tell whether ``s3`` interleaves ``s1`` and ``s2``, keeping each one's order."""
    if len(s1) + len(s2) != len(s3):
        return False
    reachable = [True] + [False] * len(s2)
    for j, ch in enumerate(s2, start=1):
        reachable[j] = reachable[j - 1] and ch == s3[j - 1]
    for i, ch1 in enumerate(s1, start=1):
        reachable[0] = reachable[0] and ch1 == s3[i - 1]
        for j, ch2 in enumerate(s2, start=1):
            target = s3[i + j - 1]
            reachable[j] = (reachable[j] and ch1 == target) or (
                reachable[j - 1] and ch2 == target
            )
    return reachable[-1]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into a sequence of dictionary words."""
    words = set(word_dict)
    n = len(s)
    breakable = [False] * n + [True]
    for start in range(n - 1, -1, -1):
        breakable[start] = any(
            breakable[end] and s[start:end] in words for end in range(start + 1, n + 1)
        )
    return breakable[0]


def combination_sum4(nums: Sequence[int], target: int) -> int:
    """Count ordered sequences of values from ``nums`` that sum to ``target``."""
    if any(x <= 0 for x in nums):
        raise ValueError("values must be positive")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - x] for x in nums if x <= total)
    return ways[target]


def can_cross(stones: Sequence[int]) -> bool:
    """Tell whether a frog can reach the last stone.

    The first jump is of one unit; after a jump of ``k`` the next one is of
    ``k - 1``, ``k`` or ``k + 1`` units, always forward onto a stone.
    """
    if not stones:
        raise ValueError("need at least one stone")
    if len(stones) == 1:
        return True
    if stones[1] != 1:
        return False
    jumps: dict[int, set[int]] = {stone: set() for stone in stones}
    jumps[stones[1]].add(1)
    for stone in stones[1:]:
        for last in tuple(jumps[stone]):
            for step in (last - 1, last, last + 1):
                if step > 0 and stone + step in jumps:
                    jumps[stone + step].add(step)
    return bool(jumps[stones[-1]])


def change(amount: int, coins: Sequence[int]) -> int:
    """Count the multisets of ``coins`` (each usable any number of times)
    that sum to ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the least cost to climb past the top, starting on step 0 or 1
    and climbing one or two steps at a time."""
    before, current = 0, 0
    for i in range(2, len(cost) + 1):
        before, current = current, min(current + cost[i - 1], before + cost[i - 2])
    return current


def num_music_playlists(n: int, goal: int, k: int) -> int:
    """Count playlists of ``goal`` songs using each of ``n`` songs at least
    once, where a song replays only after ``k`` others; modulo 10**9 + 7."""
    if n < 0 or goal < 0 or k < 0:
        raise ValueError("arguments must not be negative")
    # ways[i] holds the count for i distinct songs over the current length.
    ways = [1] + [0] * n
    for _ in range(goal):
        nxt = [0] * (n + 1)
        for songs in range(1, n + 1):
            nxt[songs] = (
                ways[songs - 1] * songs + ways[songs] * max(songs - k, 0)
            ) % MOD
        ways = nxt
    return ways[n]


def num_ways(steps: int, arr_len: int) -> int:
    """Count ways to be back at index 0 after ``steps`` moves of left, right
    or stay inside an array of ``arr_len`` cells; modulo 10**9 + 7."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    if steps == 0:
        return 1
    width = min(arr_len, steps // 2 + 1)
    if width <= 0:
        return 0
    ways = [1] + [0] * (width - 1)
    for _ in range(steps):
        ways = [
            (
                ways[pos]
                + (ways[pos - 1] if pos > 0 else 0)
                + (ways[pos + 1] if pos + 1 < width else 0)
            )
            % MOD
            for pos in range(width)
        ]
    return ways[0]


def num_of_arrays(n: int, m: int, k: int) -> int:
    """Count arrays of ``n`` values in 1..m whose running maximum changes
    exactly ``k`` times (the first element counting once); modulo 10**9 + 7."""
    if n < 1:
        raise ValueError("n must be positive")
    if m < 1 or k < 1:
        return 0
    prev_dp = [[0] * (k + 1) for _ in range(m + 1)]
    prev_prefix = [[0] * (k + 1) for _ in range(m + 1)]
    for top in range(1, m + 1):
        prev_dp[top][1] = 1
        prev_prefix[top][1] = top
    for _ in range(2, n + 1):
        dp = [[0] * (k + 1) for _ in range(m + 1)]
        prefix = [[0] * (k + 1) for _ in range(m + 1)]
        for top in range(1, m + 1):
            for cost in range(1, k + 1):
                value = top * prev_dp[top][cost] % MOD
                if top > 1 and cost > 1:
                    value = (value + prev_prefix[top - 1][cost - 1]) % MOD
                dp[top][cost] = value
                prefix[top][cost] = (prefix[top - 1][cost] + value) % MOD
        prev_dp, prev_prefix = dp, prefix
    return prev_prefix[m][k]


def min_extra_char(s: str, dictionary: Iterable[str]) -> int:
    """Return the fewest characters of ``s`` left over after cutting out
    non-overlapping dictionary words."""
    words = set(dictionary)
    n = len(s)
    extra = [0] * (n + 1)
    for start in range(n - 1, -1, -1):
        extra[start] = min(
            [1 + extra[start + 1]]
            + [extra[end] for end in range(start + 1, n + 1) if s[start:end] in words]
        )
    return extra[0]


def longest_str_chain(words: Iterable[str]) -> int:
    """Return the length of the longest chain in which each word is the
    previous one with a single letter inserted."""
    best: dict[str, int] = {}
    for word in sorted(set(words), key=len):
        best[word] = max(
            (best.get(word[:i] + word[i + 1 :], 0) + 1 for i in range(len(word))),
            default=1,
        )
    return max(best.values(), default=0)


def integer_break(n: int) -> int:
    """Return the largest product of at least two positive integers summing to ``n``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if n == 2:
        return 1
    if n == 3:
        return 2
    threes, remainder = divmod(n, 3)
    if remainder == 0:
        return 3**threes
    if remainder == 1:
        return 3 ** (threes - 1) * 4
    return 3**threes * 2


def count_orders(n: int) -> int:
    """Count orderings of ``n`` pickups and deliveries, each delivery after its
    pickup; modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = 1
    for i in range(1, n):
        total = total * (i + 1) * (2 * i + 1) % MOD
    return total