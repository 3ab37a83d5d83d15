"""Subsets, permutations and prime counting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def powerset_indices(n: int) -> list[list[int]]:
    """Every subset of ``range(n)``, ordered by its bitmask."""
    _check_size(n)
    return [[i for i in range(n) if mask >> i & 1] for mask in range(1 << n)]


def _doubling_subsets(values: Iterable[T]) -> list[list[T]]:
    result: list[list[T]] = [[]]
    for value in values:
        result += [subset + [value] for subset in result]
    return result


def combinations_of(values: Iterable[T]) -> list[list[T]]:
    """Every subset of ``values``, built by repeatedly extending the earlier ones."""
    return _doubling_subsets(values)


def subsets(values: Iterable[T]) -> list[list[T]]:
    """Every subset of ``values``, starting with the empty one."""
    return _doubling_subsets(values)


def permutations_backtrack(n: int) -> Iterator[tuple[int, ...]]:
    """Permutations of ``1..n`` in lexicographic order, by backtracking."""
    _check_size(n)
    chosen: list[int] = []
    used = [False] * (n + 1)

    def extend() -> Iterator[tuple[int, ...]]:
        if len(chosen) == n:
            yield tuple(chosen)
            return
        for candidate in range(1, n + 1):
            if used[candidate]:
                continue
            used[candidate] = True
            chosen.append(candidate)
            yield from extend()
            chosen.pop()
            used[candidate] = False

    return extend()


def _next_permutation(items: list[int]) -> bool:
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i < 0:
        return False
    j = len(items) - 1
    while items[j] <= items[i]:
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1 :] = reversed(items[i + 1 :])
    return True


def permutations_lexicographic(n: int) -> Iterator[tuple[int, ...]]:
    """Permutations of ``1..n`` in lexicographic order, by stepping to the next one."""
    _check_size(n)
    items = list(range(1, n + 1))

    def walk() -> Iterator[tuple[int, ...]]:
        yield tuple(items)
        while _next_permutation(items):
            yield tuple(items)

    return walk()


def count_primes(n: int) -> int:
    """Number of primes strictly less than ``n``, by the sieve of Eratosthenes."""
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)