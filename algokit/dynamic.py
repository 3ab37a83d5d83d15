"""Recursive and dynamic-programming solutions to counting and optimisation problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import lru_cache

Match = tuple[str, int]


def _rivals(first: Match, second: Match) -> bool:
    """Whether two results form a rivalry: one side won, the other lost, by goals."""
    (result1, goals1), (result2, goals2) = first, second
    return (result1 == "W" and result2 == "L" and goals1 > goals2) or (
        result1 == "L" and result2 == "W" and goals1 < goals2
    )


def _rivalry_gain(first: Match, second: Match) -> int:
    return first[1] + second[1]


def rivalry_recursive(team1: Sequence[Match], team2: Sequence[Match]) -> int:
    """Maximum goals in rivalry games, by plain exhaustive recursion.

    Each team is a sequence of ``(result, goals)`` pairs where result is
    ``"W"`` or ``"L"``. Games are paired in order, each game used at most once.
    """

    def best(i: int, j: int) -> int:
        if i == 0 or j == 0:
            return 0
        paired = 0
        if _rivals(team1[i - 1], team2[j - 1]):
            paired = best(i - 1, j - 1) + _rivalry_gain(team1[i - 1], team2[j - 1])
        return max(paired, best(i - 1, j - 1), best(i - 1, j), best(i, j - 1))

    return best(len(team1), len(team2))


def rivalry_memo(team1: Sequence[Match], team2: Sequence[Match]) -> int:
    """Maximum goals in rivalry games, by memoised recursion."""

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if i == 0 or j == 0:
            return 0
        paired = 0
        if _rivals(team1[i - 1], team2[j - 1]):
            paired = best(i - 1, j - 1) + _rivalry_gain(team1[i - 1], team2[j - 1])
        return max(paired, best(i - 1, j - 1), best(i, j - 1), best(i - 1, j))

    return best(len(team1), len(team2))


def rivalry_table(team1: Sequence[Match], team2: Sequence[Match]) -> int:
    """Maximum goals in rivalry games, filling a full table bottom-up."""
    table = [[0] * (len(team2) + 1) for _ in range(len(team1) + 1)]
    for i, first in enumerate(team1, start=1):
        for j, second in enumerate(team2, start=1):
            value = max(table[i - 1][j - 1], table[i][j - 1], table[i - 1][j])
            if _rivals(first, second):
                value = max(value, table[i - 1][j - 1] + _rivalry_gain(first, second))
            table[i][j] = value
    return table[len(team1)][len(team2)]


def rivalry_two_rows(team1: Sequence[Match], team2: Sequence[Match]) -> int:
    """Maximum goals in rivalry games, keeping only two rows of the table."""
    prev = [0] * (len(team2) + 1)
    for first in team1:
        curr = [0] * (len(team2) + 1)
        for j, second in enumerate(team2, start=1):
            value = max(prev[j - 1], prev[j], curr[j - 1])
            if _rivals(first, second):
                value = max(value, prev[j - 1] + _rivalry_gain(first, second))
            curr[j] = value
        prev = curr
    return prev[-1]


def _check_packs(counts: Sequence[int], prices: Sequence[float], k: int) -> None:
    if len(counts) != len(prices):
        raise ValueError("counts and prices must have the same length")
    if any(count <= 0 for count in counts):
        raise ValueError("pack sizes must be positive")
    if k < 0:
        raise ValueError("number of apples must not be negative")


def cheapest_apples_memo(counts: Sequence[int], prices: Sequence[float], k: int) -> float:
    """Cheapest way to buy exactly ``k`` apples from packs, by memoised recursion.

    Returns ``math.inf`` when ``k`` cannot be made from the pack sizes.
    """
    _check_packs(counts, prices, k)
    memo: dict[int, float] = {0: 0.0}

    def best(remaining: int) -> float:
        if remaining in memo:
            return memo[remaining]
        cost = math.inf
        for count, price in zip(counts, prices):
            if remaining - count >= 0:
                cost = min(cost, best(remaining - count) + price)
        memo[remaining] = cost
        return cost

    return best(k)


def cheapest_apples(counts: Sequence[int], prices: Sequence[float], k: int) -> float:
    """Cheapest way to buy exactly ``k`` apples from packs, bottom-up.

    Returns ``math.inf`` when ``k`` cannot be made from the pack sizes.
    """
    _check_packs(counts, prices, k)
    cost = [math.inf] * (k + 1)
    cost[0] = 0.0
    for amount in range(1, k + 1):
        for count, price in zip(counts, prices):
            if amount - count >= 0:
                cost[amount] = min(cost[amount], cost[amount - count] + price)
    return cost[k]


def series_sum(n: int) -> int:
    """Sum of 1..n, computed recursively."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    return n + series_sum(n - 1)


def grid_paths(n: int, m: int) -> int:
    """Monotone lattice paths through an n x m grid, by recursion."""
    if n < 1 or m < 1:
        raise ValueError("grid dimensions must be at least 1")

    @lru_cache(maxsize=None)
    def paths(rows: int, cols: int) -> int:
        if rows == 1 or cols == 1:
            return 1
        return paths(rows - 1, cols) + paths(rows, cols - 1)

    return paths(n, m)


def grid_paths_table(n: int, m: int) -> int:
    """Monotone lattice paths through an n x m grid, filling a table."""
    if n < 1 or m < 1:
        raise ValueError("grid dimensions must be at least 1")
    row = [1] * m
    for _ in range(1, n):
        for j in range(1, m):
            row[j] += row[j - 1]
    return row[-1]


def binomial(n: int, k: int) -> int:
    """Binomial coefficient C(n, k) from Pascal's triangle."""
    if n < 0 or not 0 <= k <= n:
        raise ValueError("binomial requires 0 <= k <= n")
    row = [1]
    for _ in range(n):
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]
    return row[k]


def ways_to_partition(n: int, m: int) -> int:
    """Number of ways to write n as a sum of parts no larger than m."""

    @lru_cache(maxsize=None)
    def ways(total: int, largest: int) -> int:
        if total == 0 and largest == 0:
            return 1
        if largest == 0 or total < 0:
            return 0
        return ways(total - largest, largest) + ways(total, largest - 1)

    return ways(n, m)


def stair_ways(n: int) -> int:
    """Ways to climb n stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError("number of stairs must not be negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def subset_sum(values: Iterable[int], k: int) -> bool:
    """Whether some subset of ``values`` adds up to exactly ``k``."""
    if k < 0:
        return False
    reachable = {0}
    for value in values:
        reachable |= {total + value for total in reachable if 0 <= total + value <= k}
    return k in reachable


def word_break(s: str, words: Iterable[str]) -> bool:
    """Whether ``s`` can be split into a sequence of dictionary words."""
    dictionary = set(words)
    buildable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        buildable[end] = any(
            buildable[start] and s[start:end] in dictionary for start in range(end)
        )
    return buildable[-1]


def ways_to_pass(n: int, total: int, passing: int) -> int:
    """Ways to score exactly ``total`` marks over ``n`` courses, each at least ``passing``."""
    if n < 0 or total < 0 or passing < 0:
        raise ValueError("arguments must not be negative")

    @lru_cache(maxsize=None)
    def ways(courses: int, marks: int) -> int:
        if courses == 0:
            return 1 if marks == 0 else 0
        return sum(ways(courses - 1, marks - score) for score in range(passing, marks + 1))

    return ways(n, total)