"""Frontier candidate generation."""

import pytest

from Gomoku_Minimax.Board import BLACK, WHITE, Board
from Gomoku_Minimax.ai import move_selector


@pytest.mark.parametrize("size, center", [(15, 7), (19, 9), (8, 4)])
def test_empty_board_returns_center_only(size, center):
    assert move_selector.generate_candidates(Board(size=size)) == [(center, center)]


def test_single_stone_neighbors_in_fixed_order():
    b = Board(size=15)
    b.place(7, 7, BLACK)
    assert move_selector.generate_candidates(b) == [
        (6, 6), (6, 7), (6, 8),
        (7, 6), (7, 8),
        (8, 6), (8, 7), (8, 8),
    ]


def test_corner_stone_is_bounds_checked():
    b = Board(size=15)
    b.place(0, 0, WHITE)
    assert move_selector.generate_candidates(b) == [(0, 1), (1, 0), (1, 1)]


def test_candidates_cover_exactly_the_frontier():
    b = Board(size=9)
    for r, c, color in [(4, 4, BLACK), (4, 5, WHITE), (3, 5, BLACK), (6, 2, WHITE), (0, 8, BLACK)]:
        b.place(r, c, color)

    moves = move_selector.generate_candidates(b)
    assert len(moves) == len(set(moves))

    expected = set()
    for r in range(b.size):
        for c in range(b.size):
            if b.cells[r][c] != 0:
                continue
            for dr, dc in move_selector.NEIGHBORS_8:
                nr, nc = r + dr, c + dc
                if b.in_bounds(nr, nc) and b.cells[nr][nc] != 0:
                    expected.add((r, c))
                    break
    assert set(moves) == expected
    assert all(b.is_empty(r, c) for r, c in moves)


def test_discovery_follows_stone_scan_order():
    b = Board(size=9)
    b.place(6, 6, BLACK)
    b.place(1, 1, WHITE)
    moves = move_selector.generate_candidates(b)
    # Stones are scanned row-major, so (1, 1)'s neighbors come first.
    assert moves[:8] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)]
    assert moves[8] == (5, 5)


def test_full_board_has_no_candidates():
    b = Board(size=3)
    for r in range(3):
        for c in range(3):
            b.place(r, c, BLACK if (r + c) % 2 == 0 else WHITE)
    assert move_selector.generate_candidates(b) == []
