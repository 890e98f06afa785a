"""Entry point for Gomoku matches. Load config, wire players, start Gomokugame."""

import logging
from pathlib import Path

import yaml

from .AIPlayer import AIPlayer, make_hint
from .Board import BLACK, WHITE
from .Gomokugame import Gomokugame
from .Player import HumanPlayer
from .ai.search_minimax import DEFAULT_BASE_DEPTHS, DIFFICULTY_NAMES
from .gui.text_view import TextView
from .utils import logger
from .utils.cli import parse_args

LOGGER = logging.getLogger(__name__)

PROJECT_DIR = Path(__file__).resolve().parent
SUPPORTED_SIZES = (15, 19)
FIRST_MOVES = ("player", "ai")
MODES = ("human-vs-ai", "ai-vs-ai", "human-vs-human")


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gomoku_Minimax/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def resolve_options(args, settings):
    """Merge CLI arguments over settings; returns a plain dict of game options."""
    board_size = args.board_size or settings.get("board_size", 15)
    if board_size not in SUPPORTED_SIZES:
        LOGGER.warning("Board size %d is not a standard preset %s", board_size, SUPPORTED_SIZES)

    difficulty_name = args.difficulty or settings.get("difficulty", "normal")
    if difficulty_name not in DIFFICULTY_NAMES:
        raise ValueError(f"Unsupported difficulty: {difficulty_name}")
    difficulty = DIFFICULTY_NAMES[difficulty_name]

    base_depths = settings.get("base_depths") or {}
    depth = args.depth if args.depth is not None else base_depths.get(difficulty_name, DEFAULT_BASE_DEPTHS[difficulty])

    first_move = args.first or settings.get("first_move", "player")
    if first_move not in FIRST_MOVES:
        raise ValueError(f"Unsupported first_move: {first_move}")
    mode = args.mode or settings.get("mode", "human-vs-ai")
    if mode not in MODES:
        raise ValueError(f"Unsupported mode: {mode}")

    return {
        "board_size": board_size,
        "difficulty": difficulty,
        "depth": depth,
        "first_move": first_move,
        "mode": mode,
        "hint_depth": args.hint_depth if args.hint_depth is not None else settings.get("hint_depth", 3),
    }


def build_players(options):
    """Return (black, white) players for the configured mode."""
    mode = options["mode"]
    hint = make_hint(options["hint_depth"])

    def ai(color):
        return AIPlayer(color=color, depth=options["depth"], difficulty=options["difficulty"])

    if mode == "ai-vs-ai":
        return ai(BLACK), ai(WHITE)
    if mode == "human-vs-human":
        return HumanPlayer(BLACK, hint=hint), HumanPlayer(WHITE, hint=hint)
    if mode == "human-vs-ai":
        if options["first_move"] == "ai":
            return ai(BLACK), HumanPlayer(WHITE, hint=hint)
        return HumanPlayer(BLACK, hint=hint), ai(WHITE)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    logger.configure(args.verbose)
    settings = load_settings(args.settings)
    options = resolve_options(args, settings)

    black, white = build_players(options)
    view = TextView()

    game = Gomokugame(
        board_size=options["board_size"],
        black_player=black,
        white_player=white,
        logger=logger.log_event,
        renderer=view.render,
        closer=view.close,
    )
    result = game.play()
    outcome = {-1: "Black wins", 1: "White wins", 0: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
