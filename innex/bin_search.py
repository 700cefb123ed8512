"""Binary searches over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def bin_search(arr: Sequence[Any], target: Any) -> int | None:
    """Return the position of an element equal to ``target``, or None."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = arr[mid]
        if value < target:
            left = mid + 1
        elif value > target:
            right = mid - 1
        else:
            return mid
    return None


def nomore_tar(arr: Sequence[Any], target: Any) -> int | None:
    """Return the position of ``target`` or of the largest element below it.

    An element equal to ``target`` is returned as soon as it is met; None is
    returned when every element is greater than ``target``.
    """
    left, right = 0, len(arr) - 1
    best: int | None = None
    while left <= right:
        mid = left + (right - left) // 2
        value = arr[mid]
        if value < target:
            best = mid
            left = mid + 1
        elif value > target:
            right = mid - 1
        else:
            return mid
    return best