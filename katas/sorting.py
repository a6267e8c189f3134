"""Classic sorting exercises: insertion, selection, cyclic and merge sort."""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence


def insertion_sort(array: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``array`` in place by insertion and return it."""
    for index in range(1, len(array)):
        key = array[index]
        position = index - 1
        while position >= 0 and array[position] > key:
            array[position + 1] = array[position]
            position -= 1
        array[position + 1] = key
    return array


def get_max_index(array: Sequence[int], start: int, end: int) -> int:
    """Return the index of the first largest element in ``array[start..end]``."""
    best = start
    for index in range(start, end + 1):
        if array[index] > array[best]:
            best = index
    return best


def selection_sort(array: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``array`` in place by moving the maximum to the end, and return it."""
    for last in reversed(range(len(array))):
        best = get_max_index(array, 0, last)
        array[best], array[last] = array[last], array[best]
    return array


def cyclic_sort(arr: MutableSequence[int]) -> MutableSequence[int]:
    """Swap values of ``1..n`` towards their slots in place and return ``arr``.

    The scan advances one extra slot whenever nothing is swapped.
    """
    index = 0
    size = len(arr)
    while index < size:
        value = arr[index]
        if 1 <= value <= size and value != arr[value - 1]:
            arr[index], arr[value - 1] = arr[value - 1], arr[index]
        else:
            index += 1
        index += 1
    return arr


def merge(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Merge two sorted sequences into a new sorted list."""
    merged: List[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(arr: Sequence[int]) -> List[int]:
    """Return a sorted copy of ``arr``."""
    if len(arr) <= 1:
        return list(arr)
    middle = len(arr) // 2
    return merge(merge_sort(arr[:middle]), merge_sort(arr[middle:]))


def _merge_range(arr: MutableSequence[int], start: int, middle: int, end: int) -> None:
    arr[start:end] = merge(arr[start:middle], arr[middle:end])


def merge_sort_in_place(
    arr: MutableSequence[int], start: int = 0, end: Optional[int] = None
) -> None:
    """Sort ``arr[start:end]`` in place."""
    if end is None:
        end = len(arr)
    if end - start <= 1:
        return
    middle = start + (end - start) // 2
    merge_sort_in_place(arr, start, middle)
    merge_sort_in_place(arr, middle, end)
    _merge_range(arr, start, middle, end)