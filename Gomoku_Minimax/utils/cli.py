"""CLI options for selecting players, board size, difficulty and config paths."""


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku with an alpha-beta AI")
    parser.add_argument("--board-size", type=int, help="Board size (15 or 19)")
    parser.add_argument(
        "--difficulty",
        choices=["normal", "hard", "impossible"],
        help="AI difficulty (adds 0, 1 or 2 plies of search; with the default base depths hard and impossible search 5 and 7 plies and can take minutes per move)",
    )
    parser.add_argument("--first", choices=["player", "ai"], help="Who plays Black and moves first")
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-ai", "human-vs-human"],
        help="Play mode",
    )
    parser.add_argument("--depth", type=int, help="Base search depth (overrides the difficulty preset)")
    parser.add_argument("--hint-depth", type=int, help="Search depth used for hints")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)
