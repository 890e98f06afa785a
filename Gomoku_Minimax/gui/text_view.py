"""Terminal board renderer."""

from ..Board import BLACK, WHITE


class TextView:
    STONES = {BLACK: "X", WHITE: "O", 0: "."}

    def __init__(self, writer=print):
        self.writer = writer

    def _status(self, current_player_color, game_result):
        if game_result is not None:
            if game_result == BLACK: return "Black Wins!"
            elif game_result == WHITE: return "White Wins!"
            elif game_result == 0: return "Draw"
            return "Game Over"
        player = "Black" if current_player_color == BLACK else "White"
        return f"{player} to move"

    def board_lines(self, board, last_move=None):
        width = len(str(board.size - 1))
        header = " " * (width + 1) + "".join(f"{c:>{width + 2}}" for c in range(board.size))
        lines = [header]
        for r, row in enumerate(board.cells):
            cells = []
            bracketed = False
            for c, value in enumerate(row):
                field = self.STONES[value].rjust(width + 2)
                if bracketed:
                    # Previous cell's "]" took this field's first pad space.
                    field = field[1:]
                bracketed = last_move == (r, c)
                if bracketed:
                    field = field[:-2] + f"[{field[-1]}]"
                cells.append(field)
            lines.append(f"{r:>{width}} " + "".join(cells))
        return lines

    def render(self, board, last_move=None, current_player_color=None, game_result=None):
        self.writer("\n".join(self.board_lines(board, last_move)))
        self.writer(self._status(current_player_color, game_result))

    def close(self):
        pass
