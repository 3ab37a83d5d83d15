import pytest

from algokit.knight import knight_chase


def test_knight_already_on_pawn():
    assert knight_chase((3, 3), (3, 3), 8, 8) == 0


def test_catch_after_pawn_steps_into_reach():
    assert knight_chase((1, 1), (2, 2), 8, 8) == 1


def test_pawn_on_last_row_has_queened():
    assert knight_chase((7, 2), (8, 1), 8, 8) is None


def test_stuck_knight_cannot_catch():
    assert knight_chase((2, 2), (1, 1), 3, 3) is None


def test_result_never_exceeds_rows_left():
    rows, cols = 8, 8
    pawn = (2, 4)
    for row in range(1, rows + 1):
        for col in range(1, cols + 1):
            result = knight_chase((row, col), pawn, rows, cols)
            if result is not None:
                assert 0 <= result < rows - pawn[0]


@pytest.mark.parametrize(
    "knight, pawn, rows, cols",
    [((0, 1), (2, 2), 8, 8), ((1, 1), (2, 9), 8, 8), ((1, 1), (1, 1), 0, 8)],
)
def test_invalid_positions_raise(knight, pawn, rows, cols):
    with pytest.raises(ValueError):
        knight_chase(knight, pawn, rows, cols)