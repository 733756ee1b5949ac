"""Binary search over sorted sequences."""

from bisect import bisect_left
from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the first index of ``target`` in sorted ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1