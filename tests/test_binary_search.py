import bisect

import pytest

from algokit.binary_search import (
    binary_search,
    count_at_most,
    count_less,
    leftmost_closed,
    leftmost_half_open,
    minimum_effort_path,
    rightmost_closed,
    rightmost_half_open,
    search_half_open,
    search_half_open_checked,
)

NUMS = [1, 2, 3, 5, 5, 5, 7, 8, 9]
DISTINCT = [1, 2, 3, 4, 5, 6, 7, 8, 9]
TARGETS = list(range(0, 12)) + [15]


@pytest.mark.parametrize("target", TARGETS)
def test_any_index_search_finds_present_values(target):
    results = [
        binary_search(NUMS, target),
        search_half_open(NUMS, target),
        search_half_open_checked(NUMS, target),
    ]
    for result in results:
        if target in NUMS:
            assert NUMS[result] == target
        else:
            assert result == -1


def test_missing_target_fifteen():
    assert binary_search(NUMS, 15) == -1
    assert search_half_open(NUMS, 15) == -1
    assert search_half_open_checked(NUMS, 15) == -1
    assert leftmost_half_open(NUMS, 15) == -1
    assert leftmost_closed(NUMS, 15) == -1
    assert rightmost_half_open(NUMS, 15) == -1
    assert rightmost_closed(NUMS, 15) == -1


def test_empty_sequence():
    assert binary_search([], 5) == -1
    assert search_half_open([], 5) == -1
    assert search_half_open_checked([], 5) == -1
    assert leftmost_half_open([], 5) == -1
    assert leftmost_closed([], 5) == -1
    assert rightmost_half_open([], 5) == -1
    assert rightmost_closed([], 5) == -1


@pytest.mark.parametrize("target", TARGETS)
def test_leftmost(target):
    expected = NUMS.index(target) if target in NUMS else -1
    assert leftmost_half_open(NUMS, target) == expected
    assert leftmost_closed(NUMS, target) == expected


@pytest.mark.parametrize("target", TARGETS)
def test_rightmost(target):
    if target in NUMS:
        expected = len(NUMS) - 1 - NUMS[::-1].index(target)
    else:
        expected = -1
    assert rightmost_half_open(NUMS, target) == expected
    assert rightmost_closed(NUMS, target) == expected


def test_leftmost_and_rightmost_of_repeated_five():
    assert leftmost_half_open(NUMS, 5) == 3
    assert leftmost_closed(NUMS, 5) == 3
    assert rightmost_half_open(NUMS, 5) == 5
    assert rightmost_closed(NUMS, 5) == 5


@pytest.mark.parametrize("target", TARGETS)
def test_count_less_matches_bisect_left(target):
    assert count_less(NUMS, target) == bisect.bisect_left(NUMS, target)


@pytest.mark.parametrize("target", TARGETS)
def test_count_at_most_matches_bisect_right(target):
    assert count_at_most(NUMS, target) == bisect.bisect_right(NUMS, target)


def test_counts_for_repeated_five():
    assert count_less(NUMS, 5) == 3
    assert count_at_most(NUMS, 5) == 6


def test_counts_for_large_target_cover_everything():
    assert count_less(NUMS, 15) == len(NUMS)
    assert count_at_most(NUMS, 15) == len(NUMS)


@pytest.mark.parametrize("position, value", list(enumerate(DISTINCT)))
def test_distinct_values_found_at_their_position(position, value):
    assert binary_search(DISTINCT, value) == position
    assert search_half_open(DISTINCT, value) == position
    assert search_half_open_checked(DISTINCT, value) == position
    assert leftmost_half_open(DISTINCT, value) == position
    assert leftmost_closed(DISTINCT, value) == position
    assert rightmost_half_open(DISTINCT, value) == position
    assert rightmost_closed(DISTINCT, value) == position


def test_minimum_effort_example():
    assert minimum_effort_path([[1, 2, 2], [3, 8, 2], [5, 3, 5]]) == 2


def test_minimum_effort_second_example():
    assert minimum_effort_path([[1, 2, 3], [3, 8, 4], [5, 3, 5]]) == 1


def test_minimum_effort_single_cell():
    assert minimum_effort_path([[42]]) == 0


def test_minimum_effort_flat_grid():
    assert minimum_effort_path([[4, 4, 4], [4, 4, 4]]) == 0


def test_minimum_effort_two_cells_equals_difference():
    assert minimum_effort_path([[0, 7]]) == 7


def test_minimum_effort_on_a_row_is_largest_step():
    assert minimum_effort_path([[1, 3, 6, 10]]) == 4


def test_minimum_effort_empty_grid_raises():
    with pytest.raises(ValueError):
        minimum_effort_path([])


def test_minimum_effort_unreachable_within_limit_raises():
    with pytest.raises(ValueError):
        minimum_effort_path([[0, 2_000_001]])