"""Candidate move generation (empty cells on the frontier of existing stones)."""


NEIGHBORS_8 = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def generate_candidates(board) -> list[tuple[int, int]]:
    """
    Return every empty cell adjacent (8-neighbourhood) to an occupied cell.
    - Discovery order: row-major over stones, then NEIGHBORS_8 order; no duplicates.
    - If board empty: return center only.
    - If board full: return an empty list.
    """
    size = board.size
    cells = board.cells
    seen = set()
    moves = []
    has_stone = False

    for row in range(size):
        for col in range(size):
            if cells[row][col] == 0:
                continue
            has_stone = True
            for dr, dc in NEIGHBORS_8:
                nr, nc = row + dr, col + dc
                if nr < 0 or nr >= size or nc < 0 or nc >= size:
                    continue
                if cells[nr][nc] != 0 or (nr, nc) in seen:
                    continue
                seen.add((nr, nc))
                moves.append((nr, nc))

    if not has_stone:
        center = size // 2
        return [(center, center)]
    return moves
