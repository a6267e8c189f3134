"""Digit and search exercises built on accumulating recursion."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple


def _split_last_digit(number: int) -> Tuple[int, int]:
    """Split off the last digit, truncating towards zero for negative numbers."""
    quotient = abs(number) // 10
    if number < 0:
        quotient = -quotient
    return quotient, number - quotient * 10


def palindrome(s: str) -> bool:
    """Tell whether the UTF-8 bytes of ``s`` read the same both ways."""
    data = s.encode("utf-8")
    return data == data[::-1]


def reverse_number(n: int, total: int = 0) -> int:
    """Append the digits of ``n`` in reverse to ``total``."""
    while n != 0:
        n, digit = _split_last_digit(n)
        total = total * 10 + digit
    return total


def is_palindrome(
    number: int, reversed_so_far: int = 0, original: Optional[int] = None
) -> bool:
    """Tell whether reversing ``number`` onto ``reversed_so_far`` gives ``original``."""
    if original is None:
        original = number
    return reverse_number(number, reversed_so_far) == original


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of ``n`` (negative for negative ``n``)."""
    total = 0
    while n != 0:
        n, digit = _split_last_digit(n)
        total += digit
    return total


def _check_index(arr: Sequence[int], index: int) -> None:
    if not 0 <= index <= len(arr):
        raise IndexError(f"index {index} out of range for length {len(arr)}")


def find_all_index(
    arr: Sequence[int],
    index: int = 0,
    target: Optional[int] = None,
    found: Optional[List[int]] = None,
) -> List[int]:
    """Return ``found`` extended by every index from ``index`` on holding ``target``."""
    _check_index(arr, index)
    prefix = list(found) if found is not None else []
    return prefix + [
        position for position in range(index, len(arr)) if arr[position] == target
    ]


def find_all(arr: Sequence[int], target: int, index: int = 0) -> List[int]:
    """Return every index from ``index`` on at which ``arr`` holds ``target``."""
    _check_index(arr, index)
    return [position for position in range(index, len(arr)) if arr[position] == target]