"""Binary-search exercises over sorted sequences and a staircase matrix search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence, Tuple

NOT_FOUND = -1


def binary_search(array: Sequence[int], target: int) -> int:
    """Return ``target`` if the sorted ``array`` holds it, otherwise -1."""
    position = bisect_left(array, target)
    if position < len(array) and array[position] == target:
        return array[position]
    return NOT_FOUND


def ceiling(arr: Sequence[int], target: int) -> int:
    """Return the smallest element of the sorted ``arr`` not below ``target``."""
    position = bisect_left(arr, target)
    if position == len(arr):
        raise ValueError(f"no element is greater than or equal to {target}")
    return arr[position]


def floor(arr: Sequence[int], target: int) -> int:
    """Return the largest element of the sorted ``arr`` not above ``target``, or -1."""
    position = bisect_right(arr, target)
    if position == 0:
        return NOT_FOUND
    return arr[position - 1]


def first_last(arr: Sequence[int], target: int, is_first: bool) -> int:
    """Return the first (or last) index of ``target`` in the sorted ``arr``, or -1."""
    start = bisect_left(arr, target)
    if start == len(arr) or arr[start] != target:
        return NOT_FOUND
    if is_first:
        return start
    return bisect_right(arr, target) - 1


def search_in_2d(matrix: Sequence[Sequence[int]], target: int) -> Tuple[int, int]:
    """Walk from the top-right corner towards ``target``; return its (row, column)."""
    if not matrix or not matrix[0]:
        return NOT_FOUND, NOT_FOUND
    row, column = 0, len(matrix[0]) - 1
    while row < len(matrix) and column >= 0:
        value = matrix[row][column]
        if value == target:
            return row, column
        if value > target:
            column -= 1
        else:
            row += 1
    return NOT_FOUND, NOT_FOUND