import random

import pytest

from algokit.partition import determinant, linear_partition


def test_partition_worked_example():
    books = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert linear_partition(books, 3) == [[1, 2, 3, 4, 5], [6, 7], [8, 9]]


def test_partition_equal_books():
    assert linear_partition([1] * 9, 3) == [[1, 1, 1], [1, 1, 1], [1, 1, 1]]


def test_partition_single_range():
    books = [4, 8, 15, 16]
    assert linear_partition(books, 1) == [books]


@pytest.mark.parametrize("seed", range(8))
def test_partition_preserves_order(seed):
    rng = random.Random(seed)
    books = [rng.randint(1, 40) for _ in range(rng.randint(3, 12))]
    k = rng.randint(1, 3)
    parts = linear_partition(books, k)
    assert len(parts) == k
    assert [b for part in parts for b in part] == books


@pytest.mark.parametrize("seed", range(5))
def test_partition_no_worse_than_single(seed):
    rng = random.Random(seed)
    books = [rng.randint(1, 40) for _ in range(8)]
    parts = linear_partition(books, 3)
    assert max(sum(p) for p in parts) <= sum(books)
    assert max(sum(p) for p in parts) >= max(books)


def test_partition_errors():
    with pytest.raises(ValueError):
        linear_partition([1, 2], 0)
    with pytest.raises(ValueError):
        linear_partition([], 2)


def test_determinant_singular_example():
    assert determinant([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == 0


@pytest.mark.parametrize("size", range(1, 6))
def test_determinant_identity(size):
    identity = [[1 if r == c else 0 for c in range(size)] for r in range(size)]
    assert determinant(identity) == 1


@pytest.mark.parametrize("seed", range(6))
def test_determinant_row_swap_flips_sign(seed):
    rng = random.Random(seed)
    matrix = [[rng.randint(-5, 5) for _ in range(4)] for _ in range(4)]
    swapped = [matrix[1], matrix[0], *matrix[2:]]
    assert determinant(swapped) == -determinant(matrix)


@pytest.mark.parametrize("seed", range(6))
def test_determinant_row_scaling(seed):
    rng = random.Random(seed)
    matrix = [[rng.randint(-5, 5) for _ in range(3)] for _ in range(3)]
    scaled = [[3 * v for v in matrix[0]], *matrix[1:]]
    assert determinant(scaled) == 3 * determinant(matrix)


@pytest.mark.parametrize("seed", range(4))
def test_determinant_triangular(seed):
    rng = random.Random(seed)
    size = 4
    matrix = [[rng.randint(1, 6) if c >= r else 0 for c in range(size)] for r in range(size)]
    diagonal = 1
    for r in range(size):
        diagonal *= matrix[r][r]
    assert determinant(matrix) == diagonal


def test_determinant_errors():
    with pytest.raises(ValueError):
        determinant([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(ValueError):
        determinant([])