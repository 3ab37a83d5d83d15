"""Monotonic-stack scans over sequences."""

from __future__ import annotations

from collections.abc import Sequence


def next_greater(values: Sequence[int]) -> list[int]:
    """For each element, the first later element that is greater, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for index, value in enumerate(values):
        while stack and value > values[stack[-1]]:
            result[stack.pop()] = value
        stack.append(index)
    return result


def daily_temperatures(temps: Sequence[int]) -> list[int]:
    """For each day, how many days until a warmer one, or 0 if none follows."""
    result = [0] * len(temps)
    stack: list[int] = []
    for index, temp in enumerate(temps):
        while stack and temp > temps[stack[-1]]:
            earlier = stack.pop()
            result[earlier] = index - earlier
        stack.append(index)
    return result


def largest_histogram(heights: Sequence[int]) -> int:
    """Largest rectangle area in a histogram whose bars are one unit wide."""
    best = 0
    stack: list[int] = []
    for index, height in enumerate([*heights, 0]):
        while stack and height < heights[stack[-1]]:
            bar = heights[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, bar * (index - left - 1))
        stack.append(index)
    return best