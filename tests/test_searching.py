import math

import pytest

from drills.searching import (
    allocate_books,
    binary_search,
    binary_search_recursive,
    contains_2d,
    count_occurrences,
    first_occurrence,
    integer_sqrt,
    is_allocation_possible,
    is_sorted,
    is_sorted_and_rotated,
    last_occurrence,
    linear_search,
    linear_search_recursive,
    matrix_binary_search,
    mountain_peak,
    pivot_index,
    search_rotated,
    sqrt_with_precision,
)

DUPLICATES = [1, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 5]
MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


def rotations(items):
    return [items[k:] + items[:k] for k in range(len(items))]


@pytest.mark.parametrize("items", [[1, 2, 3, 4, 5], [0, 1, 2, 4, 5, 6, 7]])
def test_binary_search_finds_every_element(items):
    for value in items:
        assert binary_search(items, value) == items.index(value)


def test_binary_search_missing():
    assert binary_search([1, 2, 3, 4, 5], 10) is None
    assert binary_search([], 1) is None


def test_matrix_binary_search_positions():
    for r, row in enumerate(MATRIX):
        for c, value in enumerate(row):
            assert matrix_binary_search(MATRIX, value) == (r, c)


def test_matrix_binary_search_missing():
    assert matrix_binary_search(MATRIX, 13) is None
    assert matrix_binary_search([], 13) is None


def test_contains_2d():
    grid = [[9, 2, 7], [4, 8, 1], [3, 6, 5]]
    assert contains_2d(grid, 8)
    assert not contains_2d(grid, 10)


def test_first_and_last_occurrence():
    assert first_occurrence(DUPLICATES, 3) == DUPLICATES.index(3)
    last = last_occurrence(DUPLICATES, 3)
    assert DUPLICATES[last] == 3
    assert last == len(DUPLICATES) - 1 - DUPLICATES[::-1].index(3)


def test_occurrence_missing_target():
    assert first_occurrence(DUPLICATES, 4) is None
    assert last_occurrence(DUPLICATES, 4) is None
    assert count_occurrences(DUPLICATES, 4) == 0


@pytest.mark.parametrize("target", [1, 2, 3, 5])
def test_count_occurrences(target):
    assert count_occurrences(DUPLICATES, target) == DUPLICATES.count(target)


@pytest.mark.parametrize("items", [[2, 3, 4, 5, 1, 1], [0, 10, 5, 2], [1, 3, 7, 9, 8]])
def test_mountain_peak_is_maximum(items):
    assert items[mountain_peak(items)] == max(items)


def test_mountain_peak_empty():
    with pytest.raises(ValueError):
        mountain_peak([])


def test_pivot_of_rotated_arrays():
    base = [0, 1, 2, 4, 5, 6, 7]
    for rotated in rotations(base)[1:]:
        assert pivot_index(rotated) == rotated.index(min(rotated))


def test_pivot_of_unrotated_is_last_index():
    items = [1, 2, 3, 4]
    assert pivot_index(items) == len(items) - 1


def test_pivot_empty():
    with pytest.raises(ValueError):
        pivot_index([])


def test_search_rotated_finds_all():
    base = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    for rotated in rotations(base):
        for value in base:
            index = search_rotated(rotated, value)
            assert rotated[index] == value
        assert search_rotated(rotated, 13) is None


def test_search_rotated_empty():
    assert search_rotated([], 1) is None


def test_integer_sqrt_matches_isqrt():
    for n in range(200):
        assert integer_sqrt(n) == math.isqrt(n)


def test_integer_sqrt_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-4)


def test_sqrt_with_precision_perfect_square():
    assert sqrt_with_precision(49, 3) == math.isqrt(49)


@pytest.mark.parametrize("n", [2, 10, 37])
def test_sqrt_with_precision_close_from_below(n):
    result = sqrt_with_precision(n, 3)
    assert result <= math.sqrt(n)
    assert math.sqrt(n) - result < 1e-3


def test_allocate_books_source_example():
    assert allocate_books([5, 5, 5, 5], 2) == 10


@pytest.mark.parametrize(
    "pages,students", [([10, 20, 30, 40], 2), ([12, 34, 67, 90], 2), ([5, 17, 100, 11], 4)]
)
def test_allocate_books_is_minimal(pages, students):
    answer = allocate_books(pages, students)
    assert is_allocation_possible(pages, students, answer)
    assert not is_allocation_possible(pages, students, answer - 1)


def test_allocate_books_needs_students():
    with pytest.raises(ValueError):
        allocate_books([1, 2], 0)


def test_is_allocation_possible_rejects_oversized_book():
    assert not is_allocation_possible([5, 50], 2, 20)


@pytest.mark.parametrize("items", [[2, 4, 6, 1, 2], [1, 2, 3], [3, 1, 2]])
def test_sorted_and_rotated_true(items):
    assert is_sorted_and_rotated(items)


@pytest.mark.parametrize("items", [[2, 1, 3, 4], [1, 1, 1]])
def test_sorted_and_rotated_false(items):
    assert not is_sorted_and_rotated(items)


def test_sorted_and_rotated_empty():
    with pytest.raises(ValueError):
        is_sorted_and_rotated([])


@pytest.mark.parametrize("search", [linear_search, linear_search_recursive])
def test_linear_searches(search):
    items = [4, 2, 2, 4, 63]
    assert search(items, 63)
    assert not search(items, 5)
    assert not search([], 5)


def test_binary_search_recursive():
    items = [1, 2, 3, 4, 5]
    assert all(binary_search_recursive(items, v) for v in items)
    assert not binary_search_recursive(items, 6)
    assert not binary_search_recursive([], 2)


def test_is_sorted():
    assert is_sorted([1, 2, 3, 7, 9])
    assert is_sorted([])
    assert is_sorted([3, 3])
    assert not is_sorted([1, 3, 2])