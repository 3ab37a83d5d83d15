"""Reservoir sampling of a stream and the median of a collection."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def reservoir_sample(
    stream: Iterable[T], k: int, rng: random.Random | None = None
) -> list[T]:
    """Uniform random sample of up to ``k`` items from ``stream`` in one pass.

    Streams shorter than ``k`` are returned whole, in order. ``rng`` supplies
    the randomness; the module-level generator is used when it is None.
    """
    if k < 0:
        raise ValueError("sample size must not be negative")
    chooser = rng if rng is not None else random
    reservoir: list[T] = []
    for seen, item in enumerate(stream):
        if seen < k:
            reservoir.append(item)
            continue
        slot = chooser.randint(0, seen)
        if slot < k:
            reservoir[slot] = item
    return reservoir


def median(values: Iterable[float]) -> float:
    """Middle value of ``values``; the mean of the two middle ones for even counts."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty collection")
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2