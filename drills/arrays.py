"""One-dimensional array drills: extremes, sums, rearrangements and edits."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor
from typing import Any


def _require_items(items: Sequence[Any], what: str) -> None:
    if not items:
        raise ValueError(f"an empty sequence has no {what}")


def max_value(items: Sequence[Any]) -> Any:
    """Largest element of a non-empty sequence."""
    _require_items(items, "maximum")
    return max(items)


def min_value(items: Sequence[Any]) -> Any:
    """Smallest element of a non-empty sequence."""
    _require_items(items, "minimum")
    return min(items)


def pair_sums(items: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Every ordered index pair ``(i, j)`` with ``items[i] + items[j] == target``.

    An index may be paired with itself, and both orders of a pair are listed.
    """
    return [
        (i, j)
        for i, a in enumerate(items)
        for j, b in enumerate(items)
        if a + b == target
    ]


def reverse_array(items: Sequence[Any]) -> list[Any]:
    """Elements of ``items`` in reverse order."""
    return list(reversed(items))


def array_sum(items: Sequence[int]) -> int:
    """Sum of all elements."""
    return sum(items)


def sum_from(items: Sequence[int], start: int) -> int:
    """Sum of the elements from index ``start`` to the end."""
    if not 0 <= start <= len(items):
        raise IndexError("start index out of range")
    return sum(items[start:])


def swap_alternate(items: Sequence[Any]) -> list[Any]:
    """Swap each element at an even index with its right neighbour."""
    result = list(items)
    for i in range(0, len(result) - 1, 2):
        result[i], result[i + 1] = result[i + 1], result[i]
    return result


def find_unique(items: Sequence[int]) -> int:
    """The one value that occurs an odd number of times when all others pair up."""
    return reduce(xor, items, 0)


def intersection(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Elements of ``first`` that match an element of ``second``, once per match."""
    return [a for a in first for b in second if a == b]


def move_zeros(items: Sequence[int]) -> list[int]:
    """Move all zeros to the end, keeping the order of the other elements."""
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def insert_at(items: Sequence[Any], index: int, value: Any) -> list[Any]:
    """Copy of ``items`` with ``value`` inserted before position ``index``."""
    if not 0 <= index <= len(items):
        raise IndexError("insertion index out of range")
    result = list(items)
    result.insert(index, value)
    return result


def delete_at(items: Sequence[Any], index: int) -> list[Any]:
    """Copy of ``items`` without the element at ``index``."""
    if not 0 <= index < len(items):
        raise IndexError("deletion index out of range")
    result = list(items)
    del result[index]
    return result


def recursive_sum(items: Sequence[int]) -> int:
    """Sum of the elements, adding the head to the sum of the tail."""
    if not items:
        return 0
    return items[0] + recursive_sum(items[1:])


def remove_duplicates(items: Sequence[Any]) -> list[Any]:
    """Elements of ``items`` with later repeats removed, first occurrences kept."""
    return list(dict.fromkeys(items))


def rotate(items: Sequence[Any], k: int) -> list[Any]:
    """Rotate ``items`` to the right by ``k`` places."""
    if not items:
        return []
    k %= len(items)
    return list(items[-k:]) + list(items[:-k]) if k else list(items)