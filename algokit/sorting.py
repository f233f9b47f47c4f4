"""Sorting, searching and divide-and-conquer maximum on integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

__all__ = [
    "counting_sort",
    "merge_sort",
    "quick_sort",
    "binary_search",
    "recursive_max",
]


def counting_sort(values: Iterable[int], max_value: int) -> list[int]:
    """Return the values sorted by counting; each must lie in ``0..max_value``."""
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    items = list(values)
    counts = [0] * (max_value + 1)
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} is outside 0..{max_value}")
        counts[value] += 1

    positions = list(accumulate(counts))
    result = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        result[positions[value]] = value
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding the values in ascending order (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], lb: int, ub: int) -> int:
    pivot = items[lb]
    start, end = lb, ub
    while start < end:
        while start <= ub and items[start] <= pivot:
            start += 1
        while items[end] > pivot:
            end -= 1
        if start < end:
            items[start], items[end] = items[end], items[start]
    items[lb], items[end] = items[end], items[lb]
    return end


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list, partitioning around each range's first element."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lb, ub = pending.pop()
        if lb < ub:
            pivot = _partition(items, lb, ub)
            pending.append((pivot + 1, ub))
            pending.append((lb, pivot - 1))
    return items


def binary_search(values: Sequence[int], item: int) -> int | None:
    """Return an index of ``item`` in the ascending sequence, or None if absent."""
    first, last = 0, len(values) - 1
    while first <= last:
        mid = (first + last) // 2
        if item < values[mid]:
            last = mid - 1
        elif item > values[mid]:
            first = mid + 1
        else:
            return mid
    return None


def _max_between(values: Sequence[int], p: int, r: int) -> int:
    if p == r:
        return values[p]
    mid = (p + r) // 2
    return max(_max_between(values, p, mid), _max_between(values, mid + 1, r))


def recursive_max(values: Sequence[int]) -> int:
    """Return the largest value, found by splitting the sequence in halves."""
    if not values:
        raise ValueError("cannot take the maximum of an empty sequence")
    return _max_between(values, 0, len(values) - 1)