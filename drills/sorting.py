"""Classic comparison sorts and the merge of two sorted runs.

Every function leaves its argument untouched and returns a new list.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

_COLORS = (0, 1, 2)


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly moving the smallest remaining element forward."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by passes that swap adjacent elements out of order."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def bubble_sort_recursive(items: Iterable[Any]) -> list[Any]:
    """Bubble sort where each pass is followed by a recursive call on a shorter prefix."""
    result = list(items)

    def sort_prefix(length: int) -> None:
        if length <= 1:
            return
        for j in range(length - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
        sort_prefix(length - 1)

    sort_prefix(len(result))
    return result


def _merge(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in half, sorting each half and merging them."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = len(result) // 2
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    result = list(items)

    def partition(lo: int, hi: int) -> int:
        pivot = result[lo]
        smaller = sum(1 for value in result[lo + 1:hi + 1] if value <= pivot)
        p = lo + smaller
        result[p], result[lo] = result[lo], result[p]
        i, j = lo, hi
        while i < p and j > p:
            while result[i] <= pivot:
                i += 1
            while result[j] > pivot:
                j -= 1
            if i < p and j > p:
                result[i], result[j] = result[j], result[i]
        return p

    pending = [(0, len(result) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo < hi:
            p = partition(lo, hi)
            pending.append((lo, p - 1))
            pending.append((p + 1, hi))
    return result


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two already sorted sequences into one sorted list."""
    return _merge(first, second)


def sort_colors(items: Iterable[int]) -> list[int]:
    """Sort a sequence made only of the values 0, 1 and 2."""
    counts = Counter(items)
    unexpected = set(counts) - set(_COLORS)
    if unexpected:
        raise ValueError(f"only 0, 1 and 2 are allowed, got {sorted(unexpected)}")
    return [color for color in _COLORS for _ in range(counts[color])]