"""Minimax with alpha-beta pruning, immediate win/block checks, and one-ply move ordering."""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from . import heuristic
from . import move_selector
from ..Board import BLACK
from ..engine import rules

LOGGER = logging.getLogger(__name__)

INF = float("inf")
# Extra plies per difficulty tier (0=normal, 1=hard, 2=impossible)
DIFFICULTY_BONUS = {0: 0, 1: 1, 2: 2}
DIFFICULTY_NAMES = {"normal": 0, "hard": 1, "impossible": 2}
DEFAULT_BASE_DEPTHS = {0: 3, 1: 4, 2: 5}


@dataclass(frozen=True)
class SearchResult:
    score: float
    move: Optional[Tuple[int, int]] = None

    @property
    def has_move(self):
        return self.move is not None


def effective_depth(depth, difficulty):
    try:
        return depth + DIFFICULTY_BONUS[difficulty]
    except KeyError:
        raise ValueError(f"Unknown difficulty: {difficulty!r} (expected 0, 1 or 2)") from None


class MinimaxSearcher:
    """Encapsulates the state and logic for one minimax search."""

    def __init__(self, color, depth, alpha_beta=True, block_threats=True, stats=None):
        self.color = color
        self.depth = depth
        self.alpha_beta = alpha_beta
        self.block_threats = block_threats
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.eval_counter = 0
        self.start_time = None

    def choose_move(self, board):
        """Return the best (row, col) for self.color, or None when the board is full."""
        self.start_time = time.time()
        self.node_counter = 0
        self.eval_counter = 0

        # Single exploration copy for the whole call; the live board is never touched.
        node = board.clone()
        try:
            return self._root_move(node)
        finally:
            self._record_stats()

    def _root_move(self, node):
        candidates = move_selector.generate_candidates(node)
        if not candidates:
            return None

        # Tactical guardrails: immediate win or block before deeper search.
        win_move = rules.first_winning_move(node, self.color, candidates)
        if win_move is not None:
            return win_move
        if self.block_threats:
            block_move = rules.first_winning_move(node, -self.color, candidates)
            if block_move is not None:
                return block_move

        if len(candidates) == 1:
            return candidates[0]

        result = self._minimax(node, self.color, max(self.depth, 1), -INF, INF, last_move=None)
        return result.move

    def _minimax(self, node, to_move, depth, alpha, beta, last_move):
        self.node_counter += 1

        # Terminal: the side that just moved completed five.
        just_moved = -to_move
        if last_move is not None and rules.is_win_after_move(node, *last_move, just_moved):
            return SearchResult(INF if just_moved == self.color else -INF)

        if depth == 0:
            return SearchResult(self._evaluate(node, to_move))

        candidates = move_selector.generate_candidates(node)
        if not candidates:
            # Board full: draw, fall back to the static evaluation.
            return SearchResult(self._evaluate(node, to_move))

        maximizing = to_move == self.color
        best = None
        for move in self._order_moves(node, candidates, to_move):
            with rules.simulate(node, *move, to_move):
                score = self._minimax(node, -to_move, depth - 1, alpha, beta, last_move=move).score

            if best is None or (score > best.score if maximizing else score < best.score):
                best = SearchResult(score, move)

            if maximizing:
                alpha = max(alpha, score)
            else:
                beta = min(beta, score)
            if self.alpha_beta and alpha >= beta:
                break

        return best

    def _evaluate(self, node, to_move):
        """Static value from the searcher's point of view (higher is better for self.color)."""
        self.eval_counter += 1
        value = heuristic.evaluate_for_white(node, black_to_move=(to_move == BLACK))
        return -value if self.color == BLACK else value

    def _order_moves(self, node, candidates, to_move):
        """Sort by the white ratio after the opponent takes the cell, highest first; stable."""
        black_to_move = to_move == BLACK
        keyed = []
        for move in candidates:
            with rules.simulate(node, *move, -to_move):
                self.eval_counter += 1
                keyed.append((heuristic.evaluate_for_white(node, black_to_move), move))
        keyed.sort(key=lambda item: item[0], reverse=True)
        return [move for _, move in keyed]

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        LOGGER.debug(
            "search color=%d depth=%d nodes=%d evals=%d time=%.3fs",
            self.color, self.depth, self.node_counter, self.eval_counter, total_time,
        )
        if self.stats_list is not None:
            self.stats_list.append({
                "color": self.color,
                "depth": self.depth,
                "nodes": self.node_counter,
                "evaluations": self.eval_counter,
                "time": total_time,
            })


def best_move(board, color, depth, difficulty=0, *, alpha_beta=True, block_threats=True, stats=None):
    """
    Public entry point. Searches depth + the difficulty bonus plies for `color`
    on a private copy of `board` and returns (row, col), or None if the board is full.
    """
    searcher = MinimaxSearcher(
        color=color,
        depth=effective_depth(depth, difficulty),
        alpha_beta=alpha_beta,
        block_threats=block_threats,
        stats=stats,
    )
    return searcher.choose_move(board)
