"""Number and letter patterns, each returned as a list of text lines."""

from __future__ import annotations

from collections.abc import Callable

# Leading spaces before the first row of the number pyramid.
_PYRAMID_INDENT = 3


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _spaced(values) -> str:
    return "".join(f"{value} " for value in values)


def _joined(values) -> str:
    return "".join(str(value) for value in values)


def alpha_pyramid(n: int) -> list[str]:
    """Centred rows of letters rising from A and falling back to A."""
    return [
        " " * (n - i)
        + "".join(_letter(k) for k in range(i))
        + "".join(_letter(k) for k in range(i - 2, -1, -1))
        for i in range(1, n + 1)
    ]


def number_pyramid(n: int) -> list[str]:
    """Rows counting 1 to 1, 3, 5, ... under a fixed three-space indent."""
    return [
        " " * (_PYRAMID_INDENT - i + 1) + _joined(range(1, 2 * i))
        for i in range(1, n + 1)
    ]


def column_number_square(n: int) -> list[str]:
    """Every row counts 1 to ``n``."""
    return [_spaced(range(1, n + 1)) for _ in range(n)]


def reversed_number_square(n: int) -> list[str]:
    """Every row counts ``n`` down to 1."""
    return [_spaced(range(n, 0, -1)) for _ in range(n)]


def counting_square(n: int) -> list[str]:
    """1 to ``n * n`` laid out ``n`` to a row."""
    return [_spaced(range(r * n + 1, (r + 1) * n + 1)) for r in range(n)]


def number_triangle(n: int) -> list[str]:
    """Row ``i`` counts 1 to ``i``."""
    return [_spaced(range(1, i + 1)) for i in range(1, n + 1)]


def floyd_triangle(n: int) -> list[str]:
    """Consecutive numbers from 1, one more on each row."""
    lines = []
    start = 1
    for i in range(1, n + 1):
        lines.append(_spaced(range(start, start + i)))
        start += i
    return lines


def shifted_number_triangle(n: int) -> list[str]:
    """Row ``i`` counts ``i`` values starting at ``i``."""
    return [_spaced(range(i, 2 * i)) for i in range(1, n + 1)]


def descending_number_triangle(n: int) -> list[str]:
    """Row ``i`` counts ``i`` down to 1."""
    return [_spaced(range(i, 0, -1)) for i in range(1, n + 1)]


def letter_row_square(n: int) -> list[str]:
    """Row ``i`` repeats the ``i``-th letter ``n`` times."""
    return [_spaced(_letter(i) for _ in range(n)) for i in range(n)]


def letter_sequence_square(n: int) -> list[str]:
    """Consecutive letters from A laid out ``n`` to a row."""
    return [_spaced(_letter(r * n + k) for k in range(n)) for r in range(n)]


def shifted_letter_square(n: int) -> list[str]:
    """Row ``i`` holds ``n`` consecutive letters starting at the ``i``-th."""
    return [_spaced(_letter(r + k) for k in range(n)) for r in range(n)]


def letter_triangle(n: int) -> list[str]:
    """Row ``i`` repeats the ``i``-th letter ``i`` times."""
    return [_spaced(_letter(i - 1) for _ in range(i)) for i in range(1, n + 1)]


def letter_sequence_triangle(n: int) -> list[str]:
    """Consecutive letters from A, one more on each row."""
    lines = []
    start = 0
    for i in range(1, n + 1):
        lines.append(_spaced(_letter(k) for k in range(start, start + i)))
        start += i
    return lines


def shifted_letter_triangle(n: int) -> list[str]:
    """Row ``i`` holds ``i`` consecutive letters starting at the ``i``-th."""
    return [
        _spaced(_letter(i - 1 + k) for k in range(i)) for i in range(1, n + 1)
    ]


def trailing_letter_triangle(n: int) -> list[str]:
    """Row ``i`` holds the last ``i`` of the first ``n`` letters."""
    return [
        _spaced(_letter(k) for k in range(n - i, n)) for i in range(1, n + 1)
    ]


def inverted_repeated_digits(n: int) -> list[str]:
    """Row ``i`` is ``i`` repeated ``n - i + 1`` times, shifted right by ``i - 1``."""
    return [" " * (i - 1) + str(i) * (n - i + 1) for i in range(1, n + 1)]


def right_aligned_repeated_digits(n: int) -> list[str]:
    """Row ``i`` is ``i`` repeated ``i`` times, aligned on the right."""
    return [" " * (n - i) + str(i) * i for i in range(1, n + 1)]


def inverted_counting_triangle(n: int) -> list[str]:
    """Row ``i`` counts ``i`` to ``n``, shifted right by ``i - 1``."""
    return [" " * (i - 1) + _joined(range(i, n + 1)) for i in range(1, n + 1)]


def right_aligned_floyd(n: int) -> list[str]:
    """Consecutive numbers from 1, one more on each row, aligned on the right."""
    lines = []
    start = 1
    for i in range(1, n + 1):
        lines.append(" " * (n - i) + _joined(range(start, start + i)))
        start += i
    return lines


def palindrome_pyramid(n: int) -> list[str]:
    """Centred rows counting up to ``i`` and back down to 1."""
    return [
        " " * (n - i) + _joined(range(1, i + 1)) + _joined(range(i - 1, 0, -1))
        for i in range(1, n + 1)
    ]


def number_star_frame(n: int) -> list[str]:
    """Counts up and down with a widening run of stars between them."""
    return [
        _joined(range(1, n - i + 2))
        + "*" * (2 * (i - 1))
        + _joined(range(n - i + 1, 0, -1))
        for i in range(1, n + 1)
    ]


def alternating_number_letter_triangle(n: int) -> list[str]:
    """Odd rows count 1 to ``i``; even rows spell ``i`` letters from A."""
    return [
        _joined(range(1, i + 1)) if i % 2 else "".join(_letter(k) for k in range(i))
        for i in range(1, n + 1)
    ]


def even_number_triangle(n: int) -> list[str]:
    """Consecutive even numbers from 2, one more on each row, unseparated."""
    lines = []
    value = 2
    for i in range(1, n + 1):
        lines.append(_joined(range(value, value + 2 * i, 2)))
        value += 2 * i
    return lines


def _gap(n: int, symbol: Callable[[int], str]) -> list[str]:
    width = 2 * n + 1
    lines = ["".join(symbol(k) for k in range(1, width + 1))]
    for i in range(1, n + 1):
        kept = n - i + 1
        gap_end = kept + 2 * i - 1
        lines.append(
            "".join(
                symbol(k) if k <= kept or k > gap_end else " "
                for k in range(1, width + 1)
            )
        )
    return lines


def number_gap(n: int) -> list[str]:
    """Positions 1 to ``2n + 1`` with a widening gap blanked in the middle."""
    return _gap(n, str)


def letter_gap(n: int) -> list[str]:
    """Letters from A at ``2n + 1`` positions with a widening gap in the middle."""
    return _gap(n, lambda k: _letter(k - 1))


def concentric_square(n: int) -> list[str]:
    """A ``2n - 1`` square of rings numbered ``n`` outside down to 1 in the centre."""
    size = 2 * n - 1

    def fold(k: int) -> int:
        return 2 * n - k if k > n else k

    return [
        _joined(n + 1 - min(fold(i), fold(j)) for j in range(1, size + 1))
        for i in range(1, size + 1)
    ]