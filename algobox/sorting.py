"""Elementary comparison sorts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order, by insertion sort."""
    result: list[Any] = []
    for item in values:
        position = len(result)
        while position > 0 and item < result[position - 1]:
            position -= 1
        result.insert(position, item)
    return result


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order, by selection sort."""
    result = list(values)
    for start in range(len(result) - 1):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        if smallest != start:
            result[start], result[smallest] = result[smallest], result[start]
    return result


def sort_both_ways(values: Iterable[Any]) -> tuple[list[Any], list[Any]]:
    """Return ``(ascending, descending)`` copies of ``values``."""
    ascending = selection_sort(values)
    return ascending, ascending[::-1]