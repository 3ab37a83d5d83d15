"""Maximum subarray sums and stock-trading profits."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import accumulate, combinations


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("values must not be empty")


def max_subarray_brute(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, summing every run afresh."""
    _require_values(values)
    return max(sum(values[i:j]) for i, j in combinations(range(len(values) + 1), 2))


def max_subarray_progressive(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, extending each start incrementally."""
    _require_values(values)
    return max(max(accumulate(values[start:])) for start in range(len(values)))


def max_subarray_prefix(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, using prefix sums."""
    _require_values(values)
    prefix = [0, *accumulate(values)]
    return max(prefix[j] - prefix[i] for i, j in combinations(range(len(prefix)), 2))


def max_subarray_divide(values: Sequence[int]) -> int:
    """Largest contiguous run sum by divide and conquer; the empty run counts as 0."""

    def solve(lo: int, hi: int) -> int:
        if lo > hi:
            return 0
        if lo == hi:
            return max(0, values[lo])
        mid = lo + (hi - lo) // 2
        left_best = max(0, max(accumulate(values[i] for i in range(mid, lo - 1, -1))))
        right_best = max(0, max(accumulate(values[i] for i in range(mid + 1, hi + 1))))
        return max(left_best + right_best, solve(lo, mid), solve(mid + 1, hi))

    return solve(0, len(values) - 1)


def max_subarray_kadane(values: Sequence[int]) -> int:
    """Largest contiguous run sum by a single scan; the empty run counts as 0."""
    ending_here = 0
    best = 0
    for value in values:
        ending_here = max(ending_here + value, 0)
        best = max(best, ending_here)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sell; 0 if no gain is possible."""
    profit = 0
    lowest = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def max_profit_k(prices: Sequence[int], k: int) -> int:
    """Sum of the ``k`` largest valley-to-peak gains in the price series."""
    if k < 0:
        raise ValueError("k must not be negative")
    gains: list[int] = []
    last = len(prices) - 1
    i = 0
    while i < last:
        while i < last and prices[i + 1] <= prices[i]:
            i += 1
        valley = prices[i]
        while i < last and prices[i + 1] > prices[i]:
            i += 1
        if prices[i] > valley:
            gains.append(prices[i] - valley)
    return sum(heapq.nlargest(k, gains))