"""A knight chasing a pawn that marches up the board."""

from __future__ import annotations

_MOVES = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))

Square = tuple[int, int]


def _on_board(square: Square, rows: int, cols: int) -> bool:
    row, col = square
    return 1 <= row <= rows and 1 <= col <= cols


def knight_chase(knight: Square, pawn: Square, rows: int, cols: int) -> int | None:
    """Knight moves needed to land on the pawn, or None if the pawn gets away.

    Squares are ``(row, column)`` counted from 1. After every knight move the
    pawn advances one row; once it stands on the last row it has queened and
    can no longer be caught. The knight catches it when the pawn's current
    square is reachable in no more moves than have been made so far, and the
    result is that shortest reach.
    """
    if rows < 1 or cols < 1:
        raise ValueError("board dimensions must be positive")
    if not _on_board(knight, rows, cols) or not _on_board(pawn, rows, cols):
        raise ValueError("knight and pawn must stand on the board")

    distances: dict[Square, int] = {knight: 0}
    frontier = [knight]
    pawn_row, pawn_col = pawn
    moves = 0
    while frontier and pawn_row < rows:
        target = (pawn_row, pawn_col)
        if target in distances:
            return distances[target]
        next_frontier: list[Square] = []
        for row, col in frontier:
            for d_row, d_col in _MOVES:
                square = (row + d_row, col + d_col)
                if _on_board(square, rows, cols) and square not in distances:
                    distances[square] = moves + 1
                    next_frontier.append(square)
        frontier = next_frontier
        moves += 1
        pawn_row += 1
    return None