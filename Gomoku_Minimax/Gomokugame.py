"""Game loop and turn management for freestyle Gomoku."""

from .Board import BLACK, Board
from .utils.logger import log_event


def side_name(color):
    return "Black" if color == BLACK else "White"


class Gomokugame:
    def __init__(self, board_size, black_player, white_player, logger=log_event, renderer=None, closer=None):
        self.board = Board(size=board_size)
        self.players = {BLACK: black_player, -BLACK: white_player}
        self.logger = logger
        self.move_index = 0
        self.renderer = renderer
        self.closer = closer

    def play(self):
        """Run a single game. Returns -1 (black win), 1 (white win), or 0 (draw)."""
        color = BLACK  # black starts
        game_result = None
        last_move = None
        try:
            while game_result is None:
                if self.board.is_full():
                    self.logger("Result: Draw (board full)")
                    game_result = 0
                    break

                if self.renderer:
                    self.renderer(self.board, last_move, color, game_result)

                move = self.players[color].next_move(self.board)
                if move is None:
                    self.logger(f"Resignation: {side_name(color)}")
                    game_result = -color
                    break
                if not self.board.place(*move, color):
                    self.logger(f"Disqualification: {side_name(color)} - illegal move {move}")
                    game_result = -color  # opponent wins
                    break

                last_move = move
                self.logger(f"Move {self.move_index + 1}: {'B' if color == BLACK else 'W'} {move}")

                if self.board.last_move_wins():
                    self.logger(f"Winner: {side_name(color)}")
                    game_result = color
                else:
                    color = -color  # swap turns
                self.move_index += 1

            if self.renderer:
                self.renderer(self.board, last_move, color, game_result)

            return game_result
        finally:
            if self.closer:
                self.closer()
