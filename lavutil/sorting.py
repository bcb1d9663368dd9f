"""In-place comparison sorts driven by a three-way comparison function."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, MutableSequence

Compare = Callable[[Any, Any], int]


def quicksort(items: MutableSequence[Any], cmp: Compare) -> None:
    """Sort ``items`` in place with an unstable median-of-three quicksort.

    Already sorted runs are detected and skipped. Only the sign of what
    ``cmp`` returns matters.
    """

    def swap(i: int, j: int) -> None:
        items[i], items[j] = items[j], items[i]

    if len(items) < 2:
        return
    stack = [(0, len(items) - 1)]
    while stack:
        start, end = stack.pop()
        while start < end:
            if start >= end - 1:
                if cmp(items[start], items[end]) > 0:
                    swap(start, end)
                break

            checksort = False
            right = end - 2
            left = start + 1
            mid = start + ((end - start) >> 1)
            if cmp(items[start], items[end]) > 0:
                if cmp(items[end], items[mid]) > 0:
                    swap(start, mid)
                else:
                    swap(start, end)
            elif cmp(items[start], items[mid]) > 0:
                swap(start, mid)
            else:
                checksort = True
            if cmp(items[mid], items[end]) > 0:
                swap(mid, end)
                checksort = False
            if start == end - 2:
                break

            swap(end - 1, mid)
            pivot = end - 1
            while left <= right:
                while left <= right and cmp(items[left], items[pivot]) < 0:
                    left += 1
                while left <= right and cmp(items[right], items[pivot]) > 0:
                    right -= 1
                if left <= right:
                    swap(left, right)
                    left += 1
                    right -= 1
            swap(pivot, left)

            if checksort and (mid == left - 1 or mid == left):
                mid = start
                while mid < end and cmp(items[mid], items[mid + 1]) <= 0:
                    mid += 1
                if mid == end:
                    break

            if end - left < left - start:
                stack.append((start, right))
                start = left + 1
            else:
                stack.append((left + 1, end))
                end = right


def merge_sort(items: MutableSequence[Any], cmp: Compare) -> None:
    """Sort ``items`` in place with a stable O(n log n) merge sort."""
    items[:] = sorted(items, key=cmp_to_key(cmp))