import random

import pytest

from algokit.subarrays import (
    max_profit,
    max_profit_k,
    max_subarray_brute,
    max_subarray_divide,
    max_subarray_kadane,
    max_subarray_prefix,
    max_subarray_progressive,
)

SAMPLE = [31, -49, 59, 26, -53, 58, 97, -93, -23, 85]


def test_sample():
    assert max_subarray_brute(SAMPLE) == 187
    assert max_subarray_progressive(SAMPLE) == 187
    assert max_subarray_prefix(SAMPLE) == 187
    assert max_subarray_divide(SAMPLE) == 187
    assert max_subarray_kadane(SAMPLE) == 187


@pytest.mark.parametrize("seed", range(12))
def test_solvers_agree_with_a_positive_value(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(1, 15))]
    values.append(rng.randint(1, 50))
    expected = max_subarray_brute(values)
    assert max_subarray_progressive(values) == expected
    assert max_subarray_prefix(values) == expected
    assert max_subarray_divide(values) == expected
    assert max_subarray_kadane(values) == expected
    assert expected >= max(values)


def test_all_negative_non_empty():
    values = [-5, -2, -9]
    assert max_subarray_brute(values) == -2
    assert max_subarray_progressive(values) == -2
    assert max_subarray_prefix(values) == -2


def test_all_negative_empty_allowed():
    values = [-5, -2, -9]
    assert max_subarray_kadane(values) == 0
    assert max_subarray_divide(values) == 0


def test_empty_raises_brute():
    with pytest.raises(ValueError):
        max_subarray_brute([])


def test_empty_raises_progressive():
    with pytest.raises(ValueError):
        max_subarray_progressive([])


def test_empty_raises_prefix():
    with pytest.raises(ValueError):
        max_subarray_prefix([])


def test_empty_allowed_variants():
    assert max_subarray_kadane([]) == 0
    assert max_subarray_divide([]) == 0


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_no_gain():
    assert max_profit([9, 7, 4, 1]) == 0
    assert max_profit([]) == 0
    assert max_profit([3]) == 0


@pytest.mark.parametrize("seed", range(6))
def test_max_profit_bounded(seed):
    rng = random.Random(seed)
    prices = [rng.randint(1, 100) for _ in range(20)]
    profit = max_profit(prices)
    assert 0 <= profit <= max(prices) - min(prices)


def test_max_profit_k_example():
    assert max_profit_k([3, 3, 5, 0, 0, 3, 1, 4], 2) == 6


def test_max_profit_k_short_and_zero():
    assert max_profit_k([5], 3) == 0
    assert max_profit_k([], 3) == 0
    assert max_profit_k([1, 5, 2, 8], 0) == 0


@pytest.mark.parametrize("seed", range(6))
def test_max_profit_k_unbounded_equals_rising_steps(seed):
    rng = random.Random(seed)
    prices = [rng.randint(1, 30) for _ in range(25)]
    rising = sum(max(0, b - a) for a, b in zip(prices, prices[1:]))
    assert max_profit_k(prices, len(prices)) == rising


@pytest.mark.parametrize("seed", range(4))
def test_max_profit_k_monotone_in_k(seed):
    rng = random.Random(seed)
    prices = [rng.randint(1, 30) for _ in range(20)]
    profits = [max_profit_k(prices, k) for k in range(6)]
    assert profits == sorted(profits)


def test_max_profit_k_negative():
    with pytest.raises(ValueError):
        max_profit_k([1, 2], -1)