"""Gomoku_Minimax package exports."""

from .Board import BLACK, EMPTY, WHITE, Board, new_board, place
from .Gomokugame import Gomokugame
from .Player import Player, HumanPlayer
from .AIPlayer import AIPlayer
from .ai.search_minimax import best_move

# Subpackages for rules, AI search, terminal view, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "BLACK",
    "WHITE",
    "EMPTY",
    "Board",
    "new_board",
    "place",
    "best_move",
    "Gomokugame",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "gui",
    "utils",
]
