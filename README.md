# algorithmics

A small library of well-known algorithms and data structures, written as plain
Python functions that take and return ordinary lists, strings and integers.
It has no dependencies beyond the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algorithmics.linked`: singly linked lists built from `ListNode` and
  `RandomNode` (a node that also carries a `random` pointer), with
  `list_from_values`, `list_to_values`, `partition_list`, `reverse_between`,
  `copy_random_list`, `has_cycle` and `split_list_to_parts`.
- `algorithmics.containers`: `LifoStack`, a last-in first-out stack of
  integers (`push`, `pop`, `top`, `len()`; `pop` and `top` raise `IndexError`
  when empty), and `IntHashMap`, an integer map with `put`, `get` and
  `remove`, whose `get` returns `-1` for missing keys and which supports `in`
  and `len()`.
- `algorithmics.generation`: `solve_n_queens`, `generate_trees` (every binary
  search tree over 1..n, built from `TreeNode`), `pascal_triangle` and
  `pascal_row`.
- `algorithmics.searching`: `find_median_sorted_arrays`, `search_rotated`,
  `search_rotated_with_duplicates`, `search_range`, `search_matrix`,
  `search_sorted_matrix`, `find_duplicate`, `full_bloom_flowers` and
  `min_operations_continuous`.
- `algorithmics.strings`: `group_anagrams`, `full_justify`, `reverse_words`,
  `reverse_each_word`, `remove_duplicate_letters`, `can_construct`,
  `find_the_difference`, `is_subsequence`, `repeated_substring_pattern`,
  `reorganize_string`, `backspace_compare`, `decode_at_index`,
  `min_deletions` and `take_characters`.
- `algorithmics.dynamic`: `unique_paths`, `unique_paths_with_obstacles`,
  `num_trees`, `is_interleave`, `word_break`, `combination_sum4`,
  `can_cross`, `change`, `min_cost_climbing_stairs`, `num_music_playlists`,
  `num_ways`, `num_of_arrays`, `min_extra_char`, `longest_str_chain`,
  `integer_break` and `count_orders`. Counting functions that can grow large
  (`num_music_playlists`, `num_ways`, `num_of_arrays`, `count_orders`) return
  their result modulo 10**9 + 7.
- `algorithmics.arrays`: `candy`, `max_sliding_window`, `h_index`,
  `find132pattern`, `is_monotonic`, `sort_array_by_parity`,
  `group_the_people`, `k_weakest_rows`, `num_identical_pairs`,
  `minimum_replacement`, `largest_local`, `best_closing_time` and
  `matrix_score`.
- `algorithmics.graphs`: `find_ladders`, `find_itinerary`, `update_matrix`,
  `sort_items`, `find_critical_and_pseudo_critical_edges`,
  `maximal_network_rank` and `maximum_importance`.

Invalid arguments (for example a negative size, an empty grid or a window
wider than its input) raise `ValueError`.

## Examples

```python
from algorithmics.searching import find_median_sorted_arrays
from algorithmics.strings import full_justify
from algorithmics.linked import list_from_values, list_to_values, reverse_between
from algorithmics.containers import LifoStack

find_median_sorted_arrays([1, 3], [2])          # 2.0

full_justify(["This", "is", "an", "example"], 10)
# ['This is an', 'example   ']

head = list_from_values([1, 2, 3, 4, 5])
list_to_values(reverse_between(head, 2, 4))     # [1, 4, 3, 2, 5]

stack = LifoStack()
stack.push(1)
stack.push(2)
stack.pop()                                     # 2
len(stack)                                      # 1
```

## What it does not do

The package is a library only: it installs no command-line program, and it
reads and writes no files. Every function works on the values passed to it.