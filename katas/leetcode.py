"""Array and grid puzzles: containers, k-sums, subarrays, paths and digit swaps."""

from __future__ import annotations

from typing import Iterable, List, Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the largest container area by checking every pair of lines."""
    best = 0
    for left, left_height in enumerate(height):
        for right in range(left + 1, len(height)):
            area = min(left_height, height[right]) * (right - left)
            best = max(best, area)
    return best


def max_area_two_pointer(height: Sequence[int]) -> int:
    """Return the largest container area by closing in from both ends."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        area = min(height[left], height[right]) * (right - left)
        best = max(best, area)
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def _pair_sums(
    nums: Sequence[int], start: int, target: int, prefix: List[int]
) -> List[List[int]]:
    """Find distinct pairs in the sorted ``nums[start:]`` adding up to ``target``."""
    found: List[List[int]] = []
    left, right = start, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            found.append(prefix + [nums[left], nums[right]])
            left += 1
            right -= 1
            while left < right and nums[left] == nums[left - 1]:
                left += 1
            while left < right and nums[right] == nums[right + 1]:
                right -= 1
        elif total < target:
            left += 1
        else:
            right -= 1
    return found


def three_sum(nums: Iterable[int]) -> List[List[int]]:
    """Return every distinct sorted triple of ``nums`` that sums to zero."""
    ordered = sorted(nums)
    result: List[List[int]] = []
    for index, value in enumerate(ordered):
        if index > 0 and value == ordered[index - 1]:
            continue
        result.extend(_pair_sums(ordered, index + 1, -value, [value]))
    return result


def four_sum(nums: Iterable[int], target: int) -> List[List[int]]:
    """Return every distinct sorted quadruple of ``nums`` that sums to ``target``."""
    ordered = sorted(nums)
    size = len(ordered)
    result: List[List[int]] = []
    for first in range(size - 3):
        if first > 0 and ordered[first] == ordered[first - 1]:
            continue
        for second in range(first + 1, size - 2):
            if second > first + 1 and ordered[second] == ordered[second - 1]:
                continue
            rest = target - ordered[first] - ordered[second]
            result.extend(
                _pair_sums(ordered, second + 1, rest, [ordered[first], ordered[second]])
            )
    return result


def combination_sum(candidates: Sequence[int], target: int) -> List[List[int]]:
    """Collect combinations of the candidates that reach ``target``.

    For each candidate: a candidate equal to the target is a combination of
    its own; a divisor of the target contributes one single-element entry per
    repetition needed; otherwise the candidate is doubled while it fits in
    half the remaining room and paired with any candidate equal to what is
    left over.
    """
    for candidate in candidates:
        if candidate <= 0 and candidate != target:
            raise ValueError(f"candidates must be positive, got {candidate}")

    result: List[List[int]] = []
    for candidate in candidates:
        if candidate == target:
            result.append([candidate])
            continue

        if target % candidate == 0:
            if target > 0:
                result.extend([candidate] for _ in range(target // candidate))
            continue

        element = candidate
        while element <= target - element:
            element += element
        remainder = target - element
        result.extend(
            [candidate, other] for other in candidates if other == remainder
        )
    return result


def maximum_gap(nums: Iterable[int]) -> int:
    """Return the largest difference between neighbours once ``nums`` is sorted."""
    ordered = sorted(nums)
    if len(ordered) < 2:
        return 0
    return max(upper - lower for lower, upper in zip(ordered, ordered[1:]))


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous, non-empty run of ``nums``."""
    if not nums:
        raise ValueError("max_product needs at least one number")
    prefix = suffix = 1
    best = None
    for front, back in zip(nums, reversed(nums)):
        prefix *= front
        suffix *= back
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
        if prefix == 0:
            prefix = 1
        if suffix == 0:
            suffix = 1
    return best


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a contiguous, non-empty run of ``nums``."""
    if not nums:
        raise ValueError("max_sub_array needs at least one number")
    best = None
    current = 0
    for value in nums:
        current = max(value, current + value)
        best = current if best is None else max(best, current)
    return best


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the cheapest sum along a path moving only right or down."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")

    costs: List[int] = []
    for row_number, row in enumerate(grid):
        updated: List[int] = []
        for column, value in enumerate(row):
            if row_number and column:
                value += min(costs[column], updated[column - 1])
            elif row_number:
                value += costs[column]
            elif column:
                value += updated[column - 1]
            updated.append(value)
        costs = updated
    return costs[-1]


def array_to_int(digits: Iterable[int]) -> int:
    """Read a sequence of decimal digits as one number."""
    number = 0
    for digit in digits:
        number = number * 10 + digit
    return number


def maximum_swap(num: int) -> int:
    """Return the largest number reachable by swapping two digits of ``num`` once."""
    if num <= 0:
        return num
    digits = [int(character) for character in str(num)]
    last_seen = {digit: position for position, digit in enumerate(digits)}
    for position, digit in enumerate(digits):
        for larger in range(9, digit, -1):
            later = last_seen.get(larger, -1)
            if later > position:
                digits[position], digits[later] = digits[later], digits[position]
                return array_to_int(digits)
    return num