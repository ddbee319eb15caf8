"""Array algorithms: searching, rotation, partitioning and dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def reversed_list(values: Sequence[int]) -> list[int]:
    """Return the elements of ``values`` in reverse order."""
    return list(reversed(values))


def merge_distinct(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sequences into one ascending list holding each value once."""
    return sorted(set(first) | set(second))


def find_missing(values: Sequence[int]) -> int:
    """Return the one number missing from ``values``, a shuffle of 1..n+1 minus one."""
    n = len(values)
    return (n + 1) * (n + 2) // 2 - sum(values)


def largest(values: Sequence[int]) -> int:
    """Return the largest element; ``ValueError`` if empty."""
    if not values:
        raise ValueError("largest() of an empty sequence")
    return max(values)


def smallest(values: Sequence[int]) -> int:
    """Return the smallest element; ``ValueError`` if empty."""
    if not values:
        raise ValueError("smallest() of an empty sequence")
    return min(values)


def squares(values: Sequence[int]) -> list[int]:
    """Return the square of every element."""
    return [value * value for value in values]


def total(values: Sequence[int]) -> int:
    """Return the sum of the elements."""
    return sum(values)


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of a 0/1 knapsack of the given capacity."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``heights`` holds."""
    if len(heights) < 3:
        return 0
    left = list(accumulate(heights, max))
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        max(0, min(wall_left, wall_right) - height)
        for wall_left, height, wall_right in zip(left, heights[1:-1], right[2:])
    )


def binary_search(values: Sequence[int], key: int) -> int:
    """Return an index of ``key`` in the ascending ``values``, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def min_chocolate_difference(packets: Sequence[int], students: int) -> int:
    """Return the smallest max-min spread when giving one packet to each student.

    Returns 0 when there are no students or no packets; raises ``ValueError``
    when there are more students than packets.
    """
    if students == 0 or not packets:
        return 0
    if len(packets) < students:
        raise ValueError("more students than packets")
    ordered = sorted(packets)
    return min(
        high - low for low, high in zip(ordered, ordered[students - 1 :])
    )


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """Return ``values`` rotated left by ``d`` positions (0 <= d <= len)."""
    if not 0 <= d <= len(values):
        raise ValueError("rotation must lie between 0 and the length of the sequence")
    items = list(values)
    return items[d:] + items[:d]


def tug_of_war(values: Sequence[int]) -> tuple[list[int], list[int]]:
    """Split ``values`` into halves of sizes n//2 and n - n//2 with sums as close as possible.

    Returns the two subsets, each keeping the order of the input.
    """
    items = list(values)
    n = len(items)
    wanted = n // 2
    whole = sum(items)
    half = -(-whole // 2) if whole < 0 else whole // 2
    chosen = [False] * n
    best = [False] * n
    best_diff: int | None = None

    def search(position: int, selected: int, running: int) -> None:
        nonlocal best, best_diff
        if position == n or wanted - selected > n - position:
            return
        search(position + 1, selected, running)
        selected += 1
        running += items[position]
        chosen[position] = True
        if selected == wanted:
            diff = abs(half - running)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best = list(chosen)
        else:
            search(position + 1, selected, running)
        chosen[position] = False

    search(0, 0, 0)
    first = [item for item, taken in zip(items, best) if taken]
    second = [item for item, taken in zip(items, best) if not taken]
    return first, second