"""Board state container and victory checking (five or more in a row)."""

BLACK = -1
WHITE = 1
EMPTY = 0

DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


class Board:
    def __init__(self, size=15):
        # Store cells as -1 (black), 0 (empty), 1 (white), indexed cells[row][col]
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0
        self.last_move = None

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def is_full(self):
        return self.move_count >= self.size * self.size

    def place(self, row, col, color):
        """Place a stone; return False (board untouched) if out of bounds or occupied."""
        if color not in (BLACK, WHITE):
            raise ValueError("color must be -1 (black) or 1 (white)")
        if not self.is_empty(row, col):
            return False
        self.cells[row][col] = color
        self.move_count += 1
        self.last_move = (row, col)
        return True

    def remove(self, row, col):
        """Clear a cell. Used to undo exploratory placements; last_move is kept."""
        if self.cells[row][col] != EMPTY:
            self.move_count -= 1
        self.cells[row][col] = EMPTY

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        new_board.last_move = self.last_move
        return new_board

    def wins_at(self, row, col, color):
        """Check for 5+ stones of color through (row, col), counting the cell itself."""
        for dr, dc in DIRECTIONS:
            forward = self._count_dir(row, col, dr, dc, color)
            backward = self._count_dir(row, col, -dr, -dc, color)
            if 1 + forward + backward >= 5:
                return True
        return False

    def last_move_wins(self):
        if self.last_move is None:
            return False
        row, col = self.last_move
        color = self.cells[row][col]
        if color == EMPTY:
            return False
        return self.wins_at(row, col, color)

    def _count_dir(self, row, col, dr, dc, color):
        """Count contiguous stones of color from (row, col) (exclusive) in (dr, dc)."""
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.cells[r][c] == color:
            count += 1
            r += dr
            c += dc
        return count


def new_board(size=15):
    return Board(size)


def place(board, row, col, color):
    return board.place(row, col, color)
