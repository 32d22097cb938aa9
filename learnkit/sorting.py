"""In-place sorting algorithms for lists of integers."""

from __future__ import annotations

from collections.abc import MutableSequence


def bubble_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``values`` in place, stopping once a pass makes no swap; return it."""
    for done in range(len(values) - 1):
        swapped = False
        for j in range(len(values) - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def _partition(values: MutableSequence[int], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low, high
    while i < j:
        while i < j and values[j] >= pivot:
            j -= 1
        values[i] = values[j]
        while i < j and values[i] <= pivot:
            i += 1
        values[j] = values[i]
    values[i] = pivot
    return i


def _quick_sort(values: MutableSequence[int], low: int, high: int) -> None:
    while low < high:
        split = _partition(values, low, high)
        # Recurse into the smaller half to keep the stack shallow.
        if split - low < high - split:
            _quick_sort(values, low, split - 1)
            low = split + 1
        else:
            _quick_sort(values, split + 1, high)
            high = split - 1


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with quicksort, pivoting on the first element."""
    _quick_sort(values, 0, len(values) - 1)