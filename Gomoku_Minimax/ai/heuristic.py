"""Run-length line evaluation for Gomoku (consecutive stones with blocked-side accounting)."""

from functools import lru_cache

from ..Board import BLACK, WHITE

WIN_SCORE = 100_000_000
WIN_GUARANTEE = 1_000_000


def consecutive_set_score(count, blocks, current_turn):
    """
    Score a run of `count` stones with `blocks` closed ends (0, 1 or 2).
    current_turn: the side owning the run moves next.
    """
    if blocks == 2 and count < 5:
        return 0  # dead run

    if count == 5:
        return WIN_SCORE
    if count == 4:
        # Own turn: the fifth stone is one move away.
        if current_turn:
            return WIN_GUARANTEE
        if blocks == 0:
            return WIN_GUARANTEE // 4
        return 200  # forces the opponent to block
    if count == 3:
        if blocks == 0:
            return 50_000 if current_turn else 200
        return 10 if current_turn else 5
    if count == 2:
        if blocks == 0:
            return 7 if current_turn else 5
        return 3
    if count == 1:
        return 1

    # Overline
    return WIN_SCORE * 2


def score_line(line, color, current_turn):
    """Sum closed-run scores along one line; both borders count as blocks."""
    count = 0
    blocks = 2
    score = 0
    for value in line:
        if value == color:
            count += 1
        elif value == 0:
            if count > 0:
                # Open end on this side
                blocks -= 1
                score += consecutive_set_score(count, blocks, current_turn)
                count = 0
            blocks = 1
        else:
            if count > 0:
                score += consecutive_set_score(count, blocks, current_turn)
                count = 0
            blocks = 2
    if count > 0:
        score += consecutive_set_score(count, blocks, current_turn)
    return score


@lru_cache(maxsize=None)
def _diagonals(size):
    """Coordinates of every diagonal, anti-diagonals (row + col = k) first."""
    lines = []
    for k in range(2 * size - 1):
        start = max(0, k - size + 1)
        end = min(size - 1, k)
        lines.append(tuple((r, k - r) for r in range(start, end + 1)))
    for k in range(1 - size, size):
        start = max(0, k)
        end = min(size + k - 1, size - 1)
        lines.append(tuple((r, r - k) for r in range(start, end + 1)))
    return tuple(lines)


def evaluate_horizontal(cells, color, current_turn):
    return sum(score_line(row, color, current_turn) for row in cells)


def evaluate_vertical(cells, color, current_turn):
    return sum(score_line(column, color, current_turn) for column in zip(*cells))


def evaluate_diagonal(cells, color, current_turn):
    total = 0
    for coords in _diagonals(len(cells)):
        total += score_line((cells[r][c] for r, c in coords), color, current_turn)
    return total


def get_score(board, color, black_to_move):
    """Total line score for `color`; black_to_move says whose turn is next."""
    current_turn = (color == BLACK) == black_to_move
    cells = board.cells
    return (
        evaluate_horizontal(cells, color, current_turn)
        + evaluate_vertical(cells, color, current_turn)
        + evaluate_diagonal(cells, color, current_turn)
    )


def evaluate_for_white(board, black_to_move):
    """White-to-black score ratio. Higher favors White."""
    black_score = get_score(board, BLACK, black_to_move)
    white_score = get_score(board, WHITE, black_to_move)
    if black_score == 0:
        black_score = 1.0
    return white_score / black_score
