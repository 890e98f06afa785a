"""Abstract player interface for human or AI controllers."""


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return (row, col) for the next move, or None to resign."""
        raise NotImplementedError


class HumanPlayer(Player):
    """Text-input player. Accepts 'row col', 'hint' and 'quit'."""

    PROMPT = "Enter move as 'row col' (0-indexed), 'hint' or 'quit': "

    def __init__(self, color, hint=None, reader=input, writer=print):
        super().__init__(color)
        self.hint = hint
        self.reader = reader
        self.writer = writer

    def next_move(self, board):
        while True:
            try:
                raw = self.reader(self.PROMPT).strip().lower()
            except EOFError:
                # Closed input resigns like 'quit'.
                return None
            if raw in ("quit", "q"):
                return None
            if raw in ("hint", "h"):
                self._show_hint(board)
                continue

            try:
                row_str, col_str = raw.replace(",", " ").split()
                move = int(row_str), int(col_str)
            except ValueError:
                self.writer("Invalid input format; expected two integers")
                continue

            if not board.in_bounds(*move):
                self.writer(f"Move {move} is off the board")
            elif not board.is_empty(*move):
                self.writer(f"Cell {move} is already occupied")
            else:
                return move

    def _show_hint(self, board):
        if self.hint is None:
            self.writer("Hints are not available")
            return
        move = self.hint(board, self.color)
        if move is None:
            self.writer("No move left to suggest")
        else:
            self.writer(f"Hint: try {move[0]} {move[1]}")
