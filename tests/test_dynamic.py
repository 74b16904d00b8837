import math
import random
from itertools import permutations, product

import pytest

from algorithmics.dynamic import (
    MOD,
    can_cross,
    change,
    combination_sum4,
    count_orders,
    integer_break,
    is_interleave,
    longest_str_chain,
    min_cost_climbing_stairs,
    min_extra_char,
    num_music_playlists,
    num_of_arrays,
    num_trees,
    num_ways,
    unique_paths,
    unique_paths_with_obstacles,
    word_break,
)
from algorithmics.generation import generate_trees, pascal_row


# ---- unique paths ----

@pytest.mark.parametrize("m,n", [(1, 1), (3, 7), (3, 2), (5, 5), (1, 9)])
def test_unique_paths_matches_binomial(m, n):
    assert unique_paths(m, n) == math.comb(m + n - 2, m - 1)
    assert unique_paths(m, n) == pascal_row(m + n - 2)[m - 1]


def test_unique_paths_symmetric():
    assert unique_paths(4, 6) == unique_paths(6, 4)


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


@pytest.mark.parametrize("m,n", [(1, 1), (2, 3), (4, 4)])
def test_obstacle_free_grid_matches_unique_paths(m, n):
    grid = [[0] * n for _ in range(m)]
    assert unique_paths_with_obstacles(grid) == unique_paths(m, n)


def test_obstacle_in_middle():
    assert unique_paths_with_obstacles([[0, 0, 0], [0, 1, 0], [0, 0, 0]]) == 2


def test_blocked_start_or_end():
    assert unique_paths_with_obstacles([[1, 0], [0, 0]]) == 0
    assert unique_paths_with_obstacles([[0, 0], [0, 1]]) == 0


def test_blocked_first_column():
    assert unique_paths_with_obstacles([[0], [1], [0]]) == 0


def test_obstacles_rejects_empty():
    with pytest.raises(ValueError):
        unique_paths_with_obstacles([])


# ---- trees ----

@pytest.mark.parametrize("n", range(0, 7))
def test_num_trees_counts_generated_trees(n):
    expected = 1 if n == 0 else len(generate_trees(n))
    assert num_trees(n) == expected


# ---- interleaving ----

def test_interleave_constructed_is_true():
    rng = random.Random(7)
    for _ in range(20):
        s1 = "".join(rng.choice("ab") for _ in range(rng.randint(0, 6)))
        s2 = "".join(rng.choice("ab") for _ in range(rng.randint(0, 6)))
        order = [0] * len(s1) + [1] * len(s2)
        rng.shuffle(order)
        it1, it2 = iter(s1), iter(s2)
        s3 = "".join(next(it1) if o == 0 else next(it2) for o in order)
        assert is_interleave(s1, s2, s3)


def test_interleave_length_mismatch():
    assert is_interleave("ab", "c", "abcd") is False


def test_interleave_wrong_order():
    assert is_interleave("ab", "", "ba") is False


def test_interleave_empty():
    assert is_interleave("", "", "") is True


# ---- word break ----

def _brute_break(s, words):
    if not s:
        return True
    return any(s.startswith(w) and _brute_break(s[len(w):], words) for w in words if w)


@pytest.mark.parametrize(
    "s,words",
    [
        ("leetcode", ["leet", "code"]),
        ("applepenapple", ["apple", "pen"]),
        ("catsandog", ["cats", "dog", "sand", "and", "cat"]),
        ("", ["a"]),
        ("aaab", ["a", "aa"]),
    ],
)
def test_word_break_matches_brute_force(s, words):
    assert word_break(s, words) == _brute_break(s, words)


# ---- combination sum ----

def _brute_ordered(nums, target):
    count = 0
    for length in range(target + 1):
        count += sum(1 for seq in product(nums, repeat=length) if sum(seq) == target)
    return count


@pytest.mark.parametrize("nums,target", [([1, 2, 3], 4), ([9], 3), ([2, 3], 7), ([1], 0)])
def test_combination_sum4_matches_brute_force(nums, target):
    assert combination_sum4(nums, target) == _brute_ordered(nums, target)


def test_combination_sum4_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum4([0, 1], 3)


# ---- frog ----

def test_can_cross_examples():
    assert can_cross([0, 1, 3, 5, 6, 8, 12, 17]) is True
    assert can_cross([0, 1, 2, 3, 4, 8, 9, 11]) is False


def test_can_cross_two_stones():
    assert can_cross([0, 1]) is True
    assert can_cross([0, 2]) is False


def test_can_cross_consecutive():
    assert can_cross(list(range(10))) is True


def test_can_cross_rejects_empty():
    with pytest.raises(ValueError):
        can_cross([])


# ---- coin change ----

def _brute_change(amount, coins):
    count = 0
    ranges = [range(amount // c + 1) for c in coins]
    for counts in product(*ranges):
        if sum(c * k for c, k in zip(coins, counts)) == amount:
            count += 1
    return count


@pytest.mark.parametrize("amount,coins", [(5, [1, 2, 5]), (3, [2]), (10, [10]), (0, [7]), (12, [2, 3, 4])])
def test_change_matches_brute_force(amount, coins):
    assert change(amount, coins) == _brute_change(amount, coins)


def test_change_errors():
    with pytest.raises(ValueError):
        change(-1, [1])
    with pytest.raises(ValueError):
        change(3, [0])


# ---- stairs ----

def test_min_cost_climbing_stairs_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_climbing_stairs_short():
    assert min_cost_climbing_stairs([]) == 0
    assert min_cost_climbing_stairs([5]) == 0


def test_min_cost_zero_costs():
    assert min_cost_climbing_stairs([0] * 8) == 0


# ---- playlists ----

def _brute_playlists(n, goal, k):
    count = 0
    for seq in product(range(n), repeat=goal):
        if len(set(seq)) != n:
            continue
        last = {}
        ok = True
        for pos, song in enumerate(seq):
            if song in last and pos - last[song] - 1 < k:
                ok = False
                break
            last[song] = pos
        count += ok
    return count


@pytest.mark.parametrize("n,goal,k", [(3, 3, 1), (2, 3, 0), (2, 3, 1), (3, 5, 1), (2, 4, 2)])
def test_num_music_playlists_matches_brute_force(n, goal, k):
    assert num_music_playlists(n, goal, k) == _brute_playlists(n, goal, k)


def test_num_music_playlists_is_reduced():
    assert 0 <= num_music_playlists(100, 200, 3) < MOD


# ---- staying in place ----

def _brute_ways(steps, arr_len):
    count = 0
    for moves in product((-1, 0, 1), repeat=steps):
        pos = 0
        for move in moves:
            pos += move
            if not 0 <= pos < arr_len:
                break
        else:
            count += pos == 0
    return count


@pytest.mark.parametrize("steps,arr_len", [(3, 2), (2, 4), (4, 2), (5, 10), (0, 1), (6, 1)])
def test_num_ways_matches_brute_force(steps, arr_len):
    assert num_ways(steps, arr_len) == _brute_ways(steps, arr_len)


def test_num_ways_negative_steps():
    with pytest.raises(ValueError):
        num_ways(-1, 3)


# ---- search cost arrays ----

def _brute_arrays(n, m, k):
    count = 0
    for arr in product(range(1, m + 1), repeat=n):
        best, cost = 0, 0
        for value in arr:
            if value > best:
                best, cost = value, cost + 1
        count += cost == k
    return count


@pytest.mark.parametrize("n,m,k", [(2, 3, 1), (3, 3, 2), (4, 3, 3), (1, 4, 1), (3, 2, 3), (4, 4, 2)])
def test_num_of_arrays_matches_brute_force(n, m, k):
    assert num_of_arrays(n, m, k) == _brute_arrays(n, m, k)


def test_num_of_arrays_zero_cost():
    assert num_of_arrays(3, 5, 0) == 0


# ---- extra characters ----

def test_min_extra_char_example():
    assert min_extra_char("leetscode", ["leet", "code", "leetcode"]) == 1


def test_min_extra_char_bounds():
    assert min_extra_char("abc", []) == 3
    assert min_extra_char("abc", ["abc"]) == 0
    assert min_extra_char("", ["a"]) == 0


# ---- string chain ----

def test_longest_str_chain_example():
    assert longest_str_chain(["a", "b", "ba", "bca", "bda", "bdca"]) == 4


def test_longest_str_chain_single_and_unrelated():
    assert longest_str_chain(["abcd"]) == 1
    assert longest_str_chain(["abcd", "dbqca"]) == 1
    assert longest_str_chain([]) == 0


# ---- integer break ----

def _brute_break_product(n):
    best = 0
    for first in range(1, n):
        rest = n - first
        best = max(best, first * max(rest, _brute_break_product(rest) if rest >= 2 else rest))
    return best


@pytest.mark.parametrize("n", range(2, 16))
def test_integer_break_matches_brute_force(n):
    assert integer_break(n) == _brute_break_product(n)


def test_integer_break_rejects_small():
    with pytest.raises(ValueError):
        integer_break(1)


# ---- pickup and delivery ----

def _brute_orders(n):
    events = [(kind, i) for i in range(n) for kind in "PD"]
    count = 0
    for perm in permutations(events):
        position = {event: index for index, event in enumerate(perm)}
        count += all(position[("P", i)] < position[("D", i)] for i in range(n))
    return count


@pytest.mark.parametrize("n", [1, 2, 3])
def test_count_orders_matches_brute_force(n):
    assert count_orders(n) == _brute_orders(n)


def test_count_orders_reduced_and_negative():
    assert 0 <= count_orders(500) < MOD
    with pytest.raises(ValueError):
        count_orders(-1)