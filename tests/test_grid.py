import pytest

from solvekit.grid import min_cost


def test_zigzag_grid():
    grid = [[1, 1, 1, 1], [2, 2, 2, 2], [1, 1, 1, 1], [2, 2, 2, 2]]
    assert min_cost(grid) == 3


def test_already_valid_path():
    assert min_cost([[1, 1, 3], [3, 2, 2], [1, 1, 4]]) == 0


def test_one_change():
    assert min_cost([[1, 2], [4, 3]]) == 1


def test_single_row_pointing_right():
    assert min_cost([[1, 1, 1, 1]]) == 0


def test_single_cell():
    assert min_cost([[4]]) == 0


@pytest.mark.parametrize(
    "grid",
    [
        [[2, 2, 2], [2, 2, 2], [2, 2, 2]],
        [[4, 4], [4, 4], [4, 4]],
        [[3, 2, 1], [4, 1, 2], [2, 3, 4]],
    ],
)
def test_cost_bounded_by_manhattan_distance(grid):
    cost = min_cost(grid)
    assert 0 <= cost <= len(grid) + len(grid[0]) - 2


def test_all_left_needs_every_step_changed():
    grid = [[2, 2, 2, 2]]
    assert min_cost(grid) == len(grid[0]) - 1


def test_empty_grid():
    with pytest.raises(ValueError):
        min_cost([])