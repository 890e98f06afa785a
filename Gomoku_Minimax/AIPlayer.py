"""Computer player backed by the alpha-beta search."""

from .Player import Player
from .ai import search_minimax


class AIPlayer(Player):
    def __init__(self, color, depth=3, difficulty=0, stats=None):
        super().__init__(color)
        self.depth = depth
        self.difficulty = difficulty
        self.stats = stats

    def next_move(self, board):
        return search_minimax.best_move(
            board,
            self.color,
            depth=self.depth,
            difficulty=self.difficulty,
            stats=self.stats,
        )


def make_hint(depth=3):
    """Hint callable for HumanPlayer: plain search for the asking side, no difficulty bonus."""

    def hint(board, color):
        return search_minimax.best_move(board, color, depth=depth, difficulty=0)

    return hint
