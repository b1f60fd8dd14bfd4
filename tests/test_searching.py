import pytest

from solvekit.searching import (
    binary_search,
    find_min,
    min_eating_speed,
    search_matrix,
    search_rotated,
)

BASE = [2, 5, 7, 11, 13, 17, 19]
ROTATIONS = [BASE[i:] + BASE[:i] for i in range(len(BASE))]


@pytest.mark.parametrize("nums", ROTATIONS)
def test_find_min_of_rotation(nums):
    assert find_min(nums) == min(BASE)


def test_find_min_empty():
    with pytest.raises(ValueError):
        find_min([])


@pytest.mark.parametrize("nums", ROTATIONS)
def test_search_rotated_finds_every_value(nums):
    for value in nums:
        index = search_rotated(nums, value)
        assert nums[index] == value


@pytest.mark.parametrize("nums", ROTATIONS)
def test_search_rotated_missing(nums):
    assert search_rotated(nums, 4) == -1
    assert search_rotated(nums, 100) == -1


def test_search_rotated_empty():
    assert search_rotated([], 3) == -1


MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


def test_search_matrix_finds_every_value():
    for row in MATRIX:
        for value in row:
            assert search_matrix(MATRIX, value)


def test_search_matrix_missing():
    assert not search_matrix(MATRIX, 13)
    assert not search_matrix(MATRIX, 0)
    assert not search_matrix(MATRIX, 61)
    assert not search_matrix([], 1)


def test_binary_search_finds_first():
    nums = [1, 2, 2, 2, 4, 9]
    for value in set(nums):
        assert binary_search(nums, value) == nums.index(value)


def test_binary_search_missing():
    assert binary_search([1, 3, 5], 4) == -1
    assert binary_search([1, 3, 5], 6) == -1
    assert binary_search([], 1) == -1


def _hours(piles, speed):
    return sum(-(-pile // speed) for pile in piles)


@pytest.mark.parametrize(
    ("piles", "h"),
    [([3, 6, 7, 11], 8), ([30, 11, 23, 4, 20], 5), ([30, 11, 23, 4, 20], 6), ([1], 1)],
)
def test_min_eating_speed_is_minimal(piles, h):
    speed = min_eating_speed(piles, h)
    assert _hours(piles, speed) <= h
    if speed > 1:
        assert _hours(piles, speed - 1) > h


def test_min_eating_speed_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


def test_min_eating_speed_one_hour_per_pile():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, len(piles)) == max(piles)


def test_min_eating_speed_empty():
    with pytest.raises(ValueError):
        min_eating_speed([], 3)