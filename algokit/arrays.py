"""Array puzzles: majority votes, runs, prefix sums and rotations."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def majority(values: Sequence[int]) -> int | None:
    """Boyer-Moore majority vote.

    The candidate is accepted when it fills at least half of the sequence;
    otherwise ``None`` is returned.
    """
    if not values:
        raise ValueError("values must not be empty")
    candidate = values[0]
    counter = 1
    for value in values[1:]:
        if value == candidate:
            counter += 1
        elif counter == 0:
            candidate = value
            counter = 1
        else:
            counter -= 1
    if values.count(candidate) < len(values) // 2:
        return None
    return candidate


def majority_by_count(values: Sequence[int]) -> list[int]:
    """Elements occurring more than ``len(values) // 3`` times, in order of first appearance."""
    threshold = len(values) // 3
    return [value for value, count in Counter(values).items() if count > threshold]


def majority_k(values: Sequence[int], k: int) -> list[int]:
    """Elements occurring more than ``len(values) // k`` times.

    Candidates are found with the Misra-Gries summary holding ``k - 1`` counters,
    then verified with a second pass. Results follow order of first appearance.
    """
    if k < 2:
        raise ValueError("k must be at least 2")
    needed = len(values) // k
    counters: dict[int, int] = {}
    for value in values:
        if value in counters:
            counters[value] += 1
        elif len(counters) < k - 1:
            counters[value] = 1
        else:
            counters = {key: count - 1 for key, count in counters.items() if count > 1}
    verified = Counter(value for value in values if value in counters)
    return [value for value, count in verified.items() if count > needed]


def longest_consecutive(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present in ``values``."""
    present = set(values)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end + 1 in present:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def has_subarray_multiple(values: Sequence[int], k: int) -> bool:
    """Whether a contiguous run of at least two elements sums to a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    first_seen = {0: -1}
    running = 0
    for index, value in enumerate(values):
        running = (running + value) % k
        if running in first_seen:
            if index - first_seen[running] > 1:
                return True
        else:
            first_seen[running] = index
    return False


def remove_duplicates(values: Iterable[int], limit: int) -> list[int]:
    """Keep at most ``limit`` copies of each value of an ascending sequence."""
    if limit < 1:
        raise ValueError("limit must be at least 1")
    kept: list[int] = []
    for value in values:
        if len(kept) < limit or value > kept[-limit]:
            kept.append(value)
    return kept


def first_missing_positive(values: Iterable[int]) -> int:
    """Smallest positive integer not present in ``values``."""
    items = list(values)
    seen = {value for value in items if 0 < value <= len(items)}
    return next(candidate for candidate in range(1, len(items) + 2) if candidate not in seen)


def product_except_zeros(values: Sequence[int]) -> list[int]:
    """For each element, the product of all non-zero elements divided by it.

    Zero elements receive the full product of the non-zero elements.
    """
    product = math.prod(value for value in values if value != 0)
    return [product if value == 0 else product // value for value in values]


def is_rotation(a: Sequence[int], b: Sequence[int]) -> bool:
    """Whether ``b`` is a cyclic rotation of the non-empty sequence ``a``."""
    first, second = list(a), list(b)
    if not first or len(first) != len(second):
        return False
    return any(first == second[shift:] + second[:shift] for shift in range(len(second)))


def find_duplicate_snowflakes(snowflakes: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Index pairs ``(i, j)``, ``i < j``, of snowflakes whose arms are rotations of each other."""
    by_sum: defaultdict[int, list[int]] = defaultdict(list)
    for index, flake in enumerate(snowflakes):
        by_sum[sum(flake)].append(index)
    pairs = [
        (i, j)
        for group in by_sum.values()
        for pos, i in enumerate(group)
        for j in group[pos + 1 :]
        if is_rotation(snowflakes[i], snowflakes[j])
    ]
    return sorted(pairs)