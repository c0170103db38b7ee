import pytest

from drills.matrix import (
    column_sums,
    format_matrix,
    largest_row_sum,
    rotate_image,
    row_sums,
    spiral_order,
    total_sum,
    wave_order,
)

SQUARE = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
WIDE = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]


def _flatten(matrix):
    return [value for row in matrix for value in row]


def test_rotate_image_square():
    assert rotate_image(SQUARE) == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


def test_rotate_image_four_times_is_identity():
    result = SQUARE
    for _ in range(4):
        result = rotate_image(result)
    assert result == SQUARE


def test_rotate_image_swaps_dimensions():
    rotated = rotate_image(WIDE)
    assert len(rotated) == len(WIDE[0])
    assert len(rotated[0]) == len(WIDE)
    assert rotated[0][-1] == WIDE[0][0]


def test_rotate_rejects_ragged():
    with pytest.raises(ValueError):
        rotate_image([[1, 2], [3]])


def test_spiral_order_square():
    assert spiral_order(SQUARE) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize("matrix", [SQUARE, WIDE, [[1], [2], [3]], [[1, 2, 3]]])
def test_spiral_visits_each_element_once(matrix):
    order = spiral_order(matrix)
    assert sorted(order) == sorted(_flatten(matrix))
    assert order[: len(matrix[0])] == list(matrix[0])


def test_spiral_of_empty():
    assert spiral_order([]) == []


def test_wave_order_square():
    assert wave_order(SQUARE) == [1, 4, 7, 8, 5, 2, 3, 6, 9]


def test_wave_order_columns_alternate():
    order = wave_order(WIDE)
    rows = len(WIDE)
    assert order[:rows] == [row[0] for row in WIDE]
    assert order[rows:2 * rows] == [row[1] for row in reversed(WIDE)]
    assert sorted(order) == sorted(_flatten(WIDE))


def test_sums_are_consistent():
    assert sum(row_sums(WIDE)) == total_sum(WIDE)
    assert sum(column_sums(WIDE)) == total_sum(WIDE)
    assert len(row_sums(WIDE)) == len(WIDE)
    assert len(column_sums(WIDE)) == len(WIDE[0])


def test_total_sum_matches_flattened():
    assert total_sum(SQUARE) == sum(_flatten(SQUARE))


def test_largest_row_sum_picks_maximum():
    index, value = largest_row_sum(SQUARE)
    assert index == len(SQUARE) - 1
    assert value == max(row_sums(SQUARE))


def test_largest_row_sum_first_on_tie():
    index, _ = largest_row_sum([[1, 2], [3, 0], [0, 3]])
    assert index == 0


def test_largest_row_sum_empty_raises():
    with pytest.raises(ValueError):
        largest_row_sum([])


def test_format_matrix_round_trip():
    text = format_matrix(WIDE)
    assert text.endswith("\n")
    parsed = [[int(v) for v in line.split()] for line in text.splitlines()]
    assert parsed == WIDE