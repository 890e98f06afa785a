"""Freestyle Gomoku rules: exploratory placement and win detection helpers."""

from contextlib import contextmanager

from ..Board import Board


@contextmanager
def simulate(board: Board, row: int, col: int, color: int):
    """Place a stone for the duration of the block, then remove it again."""
    if not board.place(row, col, color):
        raise ValueError(f"cannot explore occupied or out-of-bounds cell {(row, col)}")
    try:
        yield
    finally:
        board.remove(row, col)


def is_win_after_move(board: Board, row: int, col: int, color: int) -> bool:
    """Assumes stone is already placed."""
    return board.wins_at(row, col, color)


def winning_moves(board: Board, color: int, candidates):
    """Yield candidates that complete five for color, in candidate order."""
    for row, col in candidates:
        if not board.is_empty(row, col):
            continue
        with simulate(board, row, col, color):
            won = is_win_after_move(board, row, col, color)
        if won:
            yield (row, col)


def first_winning_move(board: Board, color: int, candidates):
    return next(winning_moves(board, color, candidates), None)
