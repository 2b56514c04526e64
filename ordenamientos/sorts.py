"""Classic comparison and counting sorts over sequences of integers.

Every function takes any iterable of integers and returns a new sorted
list, leaving the input untouched.
"""

from __future__ import annotations

import random
from collections.abc import Iterable


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by shifting each element left until it finds its place."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
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
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    # The left half takes the middle element, as in a [left..mid] split.
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], left: int, right: int, rng: random.Random) -> int:
    pivot_index = rng.randint(left, right)
    items[pivot_index], items[right] = items[right], items[pivot_index]
    pivot = items[right]
    i = left - 1
    for j in range(left, right):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[right] = items[right], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[int], rng: random.Random | None = None) -> list[int]:
    """Quick sort with a random pivot and Lomuto partitioning.

    ``rng`` supplies the pivot choices; a fresh generator is used when omitted.
    """
    items = list(values)
    rng = rng if rng is not None else random.Random()
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot = _partition(items, left, right, rng)
        pending.append((left, pivot - 1))
        pending.append((pivot + 1, right))
    return items


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def count_sort(values: Iterable[int]) -> list[int]:
    """Counting sort over the range between the smallest and largest value."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for number in items:
        counts[number - low] += 1
    result: list[int] = []
    for offset, count in enumerate(counts):
        result.extend([offset + low] * count)
    return result


def std_sort(values: Iterable[int]) -> list[int]:
    """Sort with the language's built-in sort."""
    return sorted(values)