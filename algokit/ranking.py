"""Priority ordering, frequency ranking and prime-factor connectivity."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence


class UnionFind:
    """Disjoint sets over the integers ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while root != self._parent[root]:
            root = self._parent[root]
        while x != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        return True

    def __len__(self) -> int:
        return len(self._parent)

    def largest_set(self) -> int:
        """Size of the largest set, or 0 when there are no elements."""
        return max((self._size[i] for i in range(len(self)) if self.find(i) == i), default=0)


def priority_indices(values: Sequence[int]) -> list[int]:
    """Indices of ``values`` ordered by ascending value, ties by ascending index."""
    return sorted(range(len(values)), key=lambda i: (values[i], i))


def top_k_frequent(values: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values; equal counts favour the larger value."""
    counts = Counter(values)
    if not 0 <= k <= len(counts):
        raise ValueError("k must be between 0 and the number of distinct values")
    ranked = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return [value for value, _ in ranked[:k]]


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, ascending; empty for ``n < 2``."""
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        else:
            divisor += 1
    if n > 1:
        factors.append(n)
    return factors


def largest_component_size(values: Sequence[int]) -> int:
    """Size of the largest group of values linked by sharing a prime factor."""
    holders: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(values):
        for prime in dict.fromkeys(prime_factors(value)):
            holders[prime].append(index)
    sets = UnionFind(len(values))
    for indices in holders.values():
        for a, b in zip(indices, indices[1:]):
            sets.union(a, b)
    return sets.largest_set()