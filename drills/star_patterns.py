"""Star and binary-digit patterns, each returned as a list of text lines."""

from __future__ import annotations

_PLUS_CENTRE = 3


def _grid(rows: int, cols: int, is_star) -> list[str]:
    return [
        "".join("*" if is_star(i, j) else " " for j in range(1, cols + 1))
        for i in range(1, rows + 1)
    ]


def cross(n: int) -> list[str]:
    """An ``n`` by ``n`` X drawn with both diagonals."""
    return _grid(n, n, lambda i, j: i == j or i + j == n + 1)


def diamond(n: int) -> list[str]:
    """A diamond ``n`` lines tall, widening until the middle line, then narrowing."""
    lines = []
    stars, spaces = 1, n // 2
    middle = n // 2 + 1
    for i in range(1, n + 1):
        lines.append(" " * spaces + "*" * stars)
        if i < middle:
            spaces -= 1
            stars += 2
        else:
            spaces += 1
            stars -= 2
    return lines


def plus(n: int) -> list[str]:
    """An ``n`` by ``n`` grid with the third row and third column starred."""
    return _grid(n, n, lambda i, j: i == _PLUS_CENTRE or j == _PLUS_CENTRE)


def star_pyramid(n: int) -> list[str]:
    """A centred pyramid of 1, 3, 5, ... stars."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def zero_one_triangle(n: int) -> list[str]:
    """Rows of alternating 1s and 0s; odd rows start with 1, even rows with 0."""
    lines = []
    for i in range(1, n + 1):
        bit = i % 2
        row = []
        for _ in range(i):
            row.append(str(bit))
            bit ^= 1
        lines.append("".join(row))
    return lines


def hollow_rectangle(rows: int, cols: int) -> list[str]:
    """The border of a ``rows`` by ``cols`` rectangle drawn in stars."""
    return _grid(rows, cols, lambda i, j: i in (1, rows) or j in (1, cols))


def star_square(n: int) -> list[str]:
    """An ``n`` by ``n`` square of padded stars."""
    return [" * " * n for _ in range(n)]


def star_triangle(n: int) -> list[str]:
    """A left-aligned triangle of padded stars, one more on each row."""
    return [" * " * i for i in range(1, n + 1)]


def right_aligned_triangle(n: int) -> list[str]:
    """A triangle of stars aligned on the right."""
    return [" " * (n - i) + "*" * i for i in range(1, n + 1)]


def inverted_star_triangle(n: int) -> list[str]:
    """A left-aligned triangle of spaced stars, one fewer on each row."""
    return ["* " * (n - i + 1) for i in range(1, n + 1)]


def spaced_star_pyramid(n: int) -> list[str]:
    """A pyramid of spaced stars."""
    return [" " * (n - i) + "* " * i for i in range(1, n + 1)]


def inverted_spaced_star_pyramid(n: int) -> list[str]:
    """An upside-down pyramid of spaced stars."""
    return [" " * (i - 1) + "* " * (n - i + 1) for i in range(1, n + 1)]


def inverted_right_aligned_triangle(n: int) -> list[str]:
    """A triangle of stars shrinking towards the right edge."""
    return [" " * (i - 1) + "*" * (n - i + 1) for i in range(1, n + 1)]


def star_gap(n: int) -> list[str]:
    """A full row of ``2n + 1`` stars over rows split by a widening gap."""
    lines = ["*" * (2 * n + 1)]
    for i in range(1, n + 1):
        stars = n - i + 1
        lines.append("*" * stars + " " * (2 * i - 1) + "*" * stars)
    return lines