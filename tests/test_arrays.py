import math

import pytest

from solvekit.arrays import (
    contains_duplicate,
    diagonal_sum,
    find_duplicate,
    find_max_average,
    find_median_sorted_arrays,
    find_score,
    group_anagrams,
    is_array_special,
    is_valid_sudoku,
    longest_consecutive,
    max_chunks_to_sorted,
    product_except_self,
    running_sum,
    special_array_queries,
    top_k_frequent,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, 5, 8, -4], 4)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 1])
    assert not contains_duplicate([1, 2, 3, 4])
    assert not contains_duplicate([])


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [-1, 1, -3, 3], [5, 7]])
def test_product_except_self_without_zeros(nums):
    result = product_except_self(nums)
    total = math.prod(nums)
    assert len(result) == len(nums)
    assert all(value * other == total for value, other in zip(nums, result))


def test_product_except_self_single_zero():
    result = product_except_self([0, 5, 2, 3])
    assert [i for i, value in enumerate(result) if value] == [0]


def test_product_except_self_empty():
    assert product_except_self([]) == []


def test_top_k_frequent():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [1, 2]


def test_top_k_frequent_ties_prefer_larger():
    assert top_k_frequent([5, 5, 9, 9, 1], 2) == [9, 5]
    assert top_k_frequent([5, 5, 9, 9, 1], 3) == [9, 5, 1]


def test_longest_consecutive_from_ranges():
    nums = list(range(40, 50)) + [1, 3, 5] + list(range(20, 25)) + [44, 45]
    assert longest_consecutive(nums) == len(range(40, 50))
    assert longest_consecutive([]) == 0


def test_group_anagrams():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    assert group_anagrams(words) == [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]


VALID_BOARD = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]


def _board(rows):
    return [list(row) for row in rows]


def _with(rows, cells):
    board = _board(rows)
    for (i, j), value in cells.items():
        board[i][j] = value
    return board


def test_sudoku_valid_board():
    assert is_valid_sudoku(_board(VALID_BOARD))
    assert is_valid_sudoku(_board(["........."] * 9))


@pytest.mark.parametrize(
    "cells",
    [
        {(0, 0): "8"},
        {(0, 0): "1", (0, 8): "1"},
        {(0, 0): "1", (5, 0): "1"},
        {(0, 0): "1", (1, 1): "1"},
    ],
)
def test_sudoku_invalid_boards(cells):
    base = VALID_BOARD if len(cells) == 1 else ["........."] * 9
    assert not is_valid_sudoku(_with(base, cells))


def test_running_sum_invariants():
    nums = [3, -1, 4, 1, -5, 9]
    result = running_sum(nums)
    assert len(result) == len(nums)
    assert result[0] == nums[0]
    assert result[-1] == sum(nums)
    assert [b - a for a, b in zip(result, result[1:])] == nums[1:]
    assert running_sum([]) == []


def test_diagonal_sum_cases():
    assert diagonal_sum([[7]]) == 7
    two = [[1, 2], [3, 4]]
    assert diagonal_sum(two) == sum(map(sum, two))
    three = [[2, 0, 3], [0, 5, 0], [4, 0, 6]]
    assert diagonal_sum(three) == sum(map(sum, three))


def test_find_duplicate():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2
    nums = [3, 1, 3, 4, 2]
    assert find_duplicate(nums) == 3
    assert nums == [3, 1, 3, 4, 2]


def test_max_chunks():
    assert max_chunks_to_sorted(list(range(6))) == 6
    assert max_chunks_to_sorted([4, 3, 2, 1, 0]) == 1
    blocks = [[1, 0], [3, 2], [4], [7, 6, 5]]
    assert max_chunks_to_sorted(sum(blocks, [])) == len(blocks)


def test_find_score_examples():
    assert find_score([2, 1, 3, 4, 5, 2]) == 7
    assert find_score([2, 3, 5, 1, 3, 2]) == 5


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [1, 2, 3, 4, 5], [10, 20, 35]])
def test_find_score_increasing(nums):
    assert find_score(nums) == sum(nums[::2])


def test_find_score_single_value():
    assert find_score([42]) == 42


def test_is_array_special():
    assert is_array_special([1])
    assert is_array_special([2, 1, 4])
    assert not is_array_special([4, 3, 1, 6])
    assert is_array_special([])


def test_special_array_queries():
    assert special_array_queries([4, 3, 1, 6], [[0, 2], [2, 3], [1, 1]]) == [False, True, True]


def test_median():
    assert find_median_sorted_arrays([1, 3], [2]) == 2.0
    assert find_median_sorted_arrays([1, 2], [3, 4]) == 2.5
    assert find_median_sorted_arrays([5], []) == 5.0


def test_median_of_nothing_raises():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


def test_max_average():
    assert find_max_average([1, 12, -5, -6, 50, 3], 1) == 50.0
    assert find_max_average([4, 8], 2) == (4 + 8) / 2
    assert find_max_average([5, 5, 5], 2) == 5.0


@pytest.mark.parametrize("k", [0, 4])
def test_max_average_bad_window(k):
    with pytest.raises(ValueError):
        find_max_average([1, 2, 3], k)