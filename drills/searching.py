"""Linear and binary searches over sequences and row-major matrices."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Any


def _bisect_equal(items: Sequence[Any], target: Any, lo: int, hi: int) -> int | None:
    """Binary search for ``target`` in ``items[lo:hi + 1]``; index or None."""
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        value = items[mid]
        if value == target:
            return mid
        if target > value:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in sorted ``items``, or None if absent."""
    return _bisect_equal(items, target, 0, len(items) - 1)


def matrix_binary_search(
    matrix: Sequence[Sequence[Any]], target: Any
) -> tuple[int, int] | None:
    """Search a matrix whose rows, read in order, form one sorted run.

    Returns ``(row, column)`` of ``target`` or None when it is absent.
    """
    if not matrix or not matrix[0]:
        return None
    cols = len(matrix[0])
    lo, hi = 0, len(matrix) * cols - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return row, col
        if target > value:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def contains_2d(matrix: Sequence[Sequence[Any]], target: Any) -> bool:
    """Return True if ``target`` appears anywhere in ``matrix``."""
    return any(target in row for row in matrix)


def _occurrence(items: Sequence[Any], target: Any, leftmost: bool) -> int | None:
    lo, hi = 0, len(items) - 1
    found = None
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        value = items[mid]
        if value == target:
            found = mid
            if leftmost:
                hi = mid - 1
            else:
                lo = mid + 1
        elif target > value:
            lo = mid + 1
        else:
            hi = mid - 1
    return found


def first_occurrence(items: Sequence[Any], target: Any) -> int | None:
    """Index of the first ``target`` in sorted ``items``, or None."""
    return _occurrence(items, target, leftmost=True)


def last_occurrence(items: Sequence[Any], target: Any) -> int | None:
    """Index of the last ``target`` in sorted ``items``, or None."""
    return _occurrence(items, target, leftmost=False)


def count_occurrences(items: Sequence[Any], target: Any) -> int:
    """Number of times ``target`` occurs in sorted ``items``."""
    first = first_occurrence(items, target)
    if first is None:
        return 0
    last = last_occurrence(items, target)
    return last - first + 1


def mountain_peak(items: Sequence[Any]) -> int:
    """Index of the peak of a sequence that rises and then falls."""
    if not items:
        raise ValueError("an empty sequence has no peak")
    lo, hi = 0, len(items) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if items[mid] < items[mid + 1]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def pivot_index(items: Sequence[Any]) -> int:
    """Index of the smallest element of a sorted, rotated sequence.

    For a sequence that is not rotated at all this is the last index.
    """
    if not items:
        raise ValueError("an empty sequence has no pivot")
    first = items[0]
    lo, hi = 0, len(items) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if items[mid] >= first:
            lo = mid + 1
        else:
            hi = mid
    return hi


def search_rotated(items: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in a sorted, rotated sequence, or None."""
    if not items:
        return None
    pivot = pivot_index(items)
    last = len(items) - 1
    if items[pivot] <= target <= items[last]:
        return _bisect_equal(items, target, pivot, last)
    return _bisect_equal(items, target, 0, pivot - 1)


def integer_sqrt(n: int) -> int:
    """Largest integer whose square does not exceed ``n``."""
    if n < 0:
        raise ValueError("square root of a negative number")
    lo, hi = 0, n
    answer = 0
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        square = mid * mid
        if square == n:
            return mid
        if square < n:
            answer = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return answer


def sqrt_with_precision(n: int, precision: int) -> float:
    """Square root of ``n`` refined to ``precision`` decimal places from below."""
    result = float(integer_sqrt(n))
    factor = 1.0
    for _ in range(precision):
        factor /= 10
        candidate = result
        while candidate * candidate < n:
            result = candidate
            candidate += factor
    return result


def is_allocation_possible(pages: Sequence[int], students: int, limit: int) -> bool:
    """Whether books can go, in order, to ``students`` with at most ``limit`` pages each."""
    count = 1
    total = 0
    for book in pages:
        if total + book <= limit:
            total += book
        else:
            count += 1
            if count > students or book > limit:
                return False
            total = book
    return True


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages any one student must read."""
    if students < 1:
        raise ValueError("at least one student is required")
    lo, hi = 0, sum(pages)
    answer = hi
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if is_allocation_possible(pages, students, mid):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def is_sorted_and_rotated(items: Sequence[Any]) -> bool:
    """True when ``items`` is a non-decreasing run rotated by some amount.

    The sequence must show exactly one descent, counting the wrap from the
    last element back to the first.
    """
    if not items:
        raise ValueError("an empty sequence cannot be checked")
    drops = sum(1 for a, b in pairwise(items) if a > b)
    if items[-1] > items[0]:
        drops += 1
    return drops == 1


def linear_search(items: Sequence[Any], target: Any) -> bool:
    """True if ``target`` is one of ``items``."""
    return any(item == target for item in items)


def binary_search_recursive(items: Sequence[Any], target: Any) -> bool:
    """True if ``target`` is in sorted ``items``, found by recursive halving."""

    def search(lo: int, hi: int) -> bool:
        if lo > hi:
            return False
        mid = lo + (hi - lo) // 2
        if items[mid] == target:
            return True
        if target > items[mid]:
            return search(mid + 1, hi)
        return search(lo, mid - 1)

    return search(0, len(items) - 1)


def linear_search_recursive(items: Sequence[Any], target: Any) -> bool:
    """True if ``target`` is one of ``items``, checked element by element recursively."""

    def search(index: int) -> bool:
        if index == len(items):
            return False
        if items[index] == target:
            return True
        return search(index + 1)

    return search(0)


def is_sorted(items: Sequence[Any]) -> bool:
    """True if ``items`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(items))