"""Linear partition of a sequence and matrix determinants."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import accumulate


def linear_partition(books: Sequence[int], k: int) -> list[list[int]]:
    """Split ``books`` into ``k`` consecutive ranges minimising the largest range sum.

    When there are fewer books than ranges, leading ranges come out empty.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if not books:
        raise ValueError("books must not be empty")
    n = len(books)
    prefix = [0, *accumulate(books)]
    cost = [[0] * (k + 1) for _ in range(n + 1)]
    divider = [[0] * (k + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        cost[i][1] = prefix[i]
    for j in range(1, k + 1):
        cost[1][j] = books[0]

    for i in range(2, n + 1):
        for j in range(2, k + 1):
            best = math.inf
            for x in range(1, i):
                candidate = max(cost[x][j - 1], prefix[i] - prefix[x])
                if candidate < best:
                    best = candidate
                    divider[i][j] = x
            cost[i][j] = best

    parts: list[list[int]] = []
    end, ranges = n, k
    while ranges > 1:
        start = divider[end][ranges]
        parts.append(list(books[start:end]))
        end, ranges = start, ranges - 1
    parts.append(list(books[:end]))
    parts.reverse()
    return parts


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Determinant of a square matrix by cofactor expansion along the first row."""
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    if size == 1:
        return matrix[0][0]
    if size == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]
    total = 0
    for col, pivot in enumerate(matrix[0]):
        minor = [[v for c, v in enumerate(row) if c != col] for row in matrix[1:]]
        sign = -1 if col % 2 else 1
        total += sign * pivot * determinant(minor)
    return total