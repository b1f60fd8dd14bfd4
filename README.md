# solvekit

A collection of classic algorithm solutions as plain Python functions and a few
small classes. It has no dependencies and needs Python 3.10 or later.

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

| Module | Contents |
| --- | --- |
| `solvekit.arithmetic` | `single_number`, `fizz_buzz`, `number_of_steps`, `is_palindrome_number` |
| `solvekit.arrays` | `two_sum`, `contains_duplicate`, `product_except_self`, `top_k_frequent`, `longest_consecutive`, `group_anagrams`, `is_valid_sudoku`, `running_sum`, `diagonal_sum`, `find_duplicate`, `max_chunks_to_sorted`, `find_score`, `is_array_special`, `special_array_queries`, `find_median_sorted_arrays`, `find_max_average` |
| `solvekit.strings` | `is_palindrome`, `roman_to_int`, `longest_common_prefix`, `reverse_words`, `is_valid_parentheses`, `generate_parentheses`, `is_anagram`, `can_construct`, `length_of_last_word`, `zigzag_convert`, `longest_palindrome`, `eval_rpn` |
| `solvekit.windows` | `max_area`, `max_profit`, `three_sum`, `two_sum_sorted`, `trap`, `length_of_longest_substring`, `character_replacement`, `check_inclusion`, `min_window`, `max_sliding_window` |
| `solvekit.searching` | `find_min`, `search_rotated`, `search_matrix`, `binary_search`, `min_eating_speed` |
| `solvekit.stacks` | `daily_temperatures`, `largest_rectangle_area`, `car_fleet` |
| `solvekit.grid` | `min_cost` |
| `solvekit.structures` | `TimeMap`, `LRUCache`, `MinStack` |
| `solvekit.linked_lists` | `ListNode`, `RandomNode`, `build_list`, `list_values`, `copy_random_list`, `has_cycle`, `reorder_list`, `remove_nth_from_end`, `add_two_numbers`, `reverse_list`, `merge_two_lists`, `merge_k_lists`, `reverse_k_group`, `middle_node` |
| `solvekit.trees` | `TreeNode`, `build_tree`, `tree_values`, `max_depth`, `is_balanced`, `invert_tree`, `diameter_of_binary_tree` |

Import from the modules directly; the top-level `solvekit` package only carries
`__version__`.

## Examples

```python
from solvekit.arrays import two_sum
from solvekit.strings import roman_to_int
from solvekit.windows import min_window

two_sum([2, 7, 11, 15], 9)          # [0, 1]
roman_to_int("MCMXCIV")             # 1994
min_window("ADOBECODEBANC", "ABC")  # "BANC"
```

The containers keep their state between calls:

```python
from solvekit.structures import LRUCache, MinStack, TimeMap

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)      # 1
cache.put(3, 3)   # evicts key 2
cache.get(2)      # -1
len(cache)        # 2

stack = MinStack()
for value in (-2, 0, -3):
    stack.push(value)
stack.get_min()   # -3
stack.pop()
stack.get_min()   # -2

store = TimeMap()
store.set("foo", "bar", 1)
store.get("foo", 3)   # "bar"
store.get("foo", 0)   # ""
```

Linked lists and trees are built from plain Python lists. Trees use level order,
with `None` for a missing child:

```python
from solvekit.linked_lists import build_list, list_values, reverse_list
from solvekit.trees import build_tree, max_depth, tree_values, invert_tree

list_values(reverse_list(build_list([1, 2, 3])))      # [3, 2, 1]
max_depth(build_tree([3, 9, 20, None, None, 15, 7]))  # 3
tree_values(invert_tree(build_tree([2, 1, 3])))       # [2, 3, 1]
```

## Behaviour worth knowing

- `top_k_frequent` breaks ties in count by putting larger values first.
- `group_anagrams` returns groups in the order their first word appeared.
- `longest_palindrome` returns the last of several equally long palindromes.
- `is_palindrome` looks only at ASCII letters and digits, ignoring case.
- `eval_rpn` divides with truncation toward zero.
- `min_eating_speed` returns the largest pile size when no speed finishes in time.
- `number_of_steps` returns 0 for zero and negative numbers.
- `reorder_list`, `reverse_list`, `invert_tree` and the other list and tree
  operations relink the nodes they are given rather than copying them;
  `copy_random_list` and `add_two_numbers` build new nodes.
- `MinStack.pop` on an empty stack does nothing; `MinStack.top` and
  `MinStack.get_min` raise `IndexError` on an empty stack.

Invalid input raises `ValueError`, for example an `LRUCache` capacity below 1,
an empty list for `find_median_sorted_arrays`, `max_profit`, `find_min` or
`min_eating_speed`, a window size that does not fit in `find_max_average` or
`max_sliding_window`, a malformed expression in `eval_rpn`, an empty grid in
`min_cost`, a non-positive group size in `reverse_k_group`, and an `n` in
`remove_nth_from_end` that is below 1 or longer than the list.

## What it does not do

solvekit is a library only: it has no command-line tool, reads no files and
keeps nothing between runs. The containers in `solvekit.structures` live in
memory.