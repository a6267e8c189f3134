"""Puzzles solved by placing each value in the slot it belongs to."""

from __future__ import annotations

from typing import Iterable, List, MutableSequence


def _require_range(values: Iterable[int], low: int, high: int) -> None:
    for value in values:
        if not low <= value <= high:
            raise ValueError(f"value {value} is outside the range {low}..{high}")


def _settle(arr: MutableSequence[int], index: int, target: int) -> None:
    arr[index], arr[target] = arr[target], arr[index]


def find_all_duplicates(arr: Iterable[int]) -> List[int]:
    """Return every value of ``1..n`` that occurs more than once, in discovery order."""
    work = list(arr)
    size = len(work)
    _require_range(work, 1, size)
    found: List[int] = []
    index = 0
    while index < size:
        value = work[index]
        if value != index + 1 and value != work[value - 1]:
            _settle(work, index, value - 1)
            continue
        if value != index + 1 and value not in found:
            found.append(value)
        index += 1
    return found


def find_missing_numbers(arr: Iterable[int]) -> List[int]:
    """Return the numbers of ``0..n-1`` absent from ``arr``."""
    work = list(arr)
    size = len(work)
    index = 0
    while index < size:
        value = work[index]
        if 0 <= value < size and work[value] != value:
            _settle(work, index, value)
        else:
            index += 1
    return [position for position, value in enumerate(work) if value != position]


def find_duplicate(arr: Iterable[int]) -> int:
    """Return the first repeated value of ``1..n`` met while placing, or -1."""
    work = list(arr)
    size = len(work)
    _require_range(work, 1, size)
    index = 0
    while index < size:
        value = work[index]
        if value == index + 1:
            index += 1
        elif value != work[value - 1]:
            _settle(work, index, value - 1)
        else:
            return value
    return -1


def missing_number(arr: Iterable[int]) -> int:
    """Return the first number of ``0..n-1`` absent from ``arr``, or -1."""
    work = list(arr)
    size = len(work)
    _require_range(work, 0, max(size, max(work, default=0)))
    index = 0
    while index < size:
        value = work[index]
        if value < size and work[value] != value:
            _settle(work, index, value)
        else:
            index += 1
    return next(
        (position for position, value in enumerate(work) if value != position), -1
    )


def missing_positive(arr: Iterable[int]) -> int:
    """Return the smallest positive integer absent from ``arr``."""
    work = list(arr)
    size = len(work)
    index = 0
    while index < size:
        value = work[index]
        if 0 < value <= size and work[value - 1] != value:
            _settle(work, index, value - 1)
        else:
            index += 1
    return next(
        (position + 1 for position, value in enumerate(work) if value != position + 1),
        size + 1,
    )


def find_error_pairs(arr: Iterable[int]) -> List[int]:
    """Return each misplaced value followed by the number that belongs in its slot."""
    work = list(arr)
    size = len(work)
    _require_range(work, 1, size)
    index = 0
    while index < size:
        value = work[index]
        if value != work[value - 1]:
            _settle(work, index, value - 1)
        else:
            index += 1
    pairs: List[int] = []
    for position, value in enumerate(work):
        if value != position + 1:
            pairs.extend((value, position + 1))
    return pairs