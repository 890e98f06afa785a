"""Settings loading, CLI overrides, player wiring and the text view."""

import pytest

from Gomoku_Minimax import main
from Gomoku_Minimax.AIPlayer import AIPlayer
from Gomoku_Minimax.Board import BLACK, WHITE, Board
from Gomoku_Minimax.Player import HumanPlayer
from Gomoku_Minimax.gui.text_view import TextView
from Gomoku_Minimax.utils.cli import parse_args


def test_default_settings_file_is_found_from_any_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = main.load_settings("config/settings.yaml")
    assert settings["board_size"] == 15
    assert settings["base_depths"] == {"normal": 3, "hard": 4, "impossible": 5}


def test_settings_provide_defaults():
    settings = {"board_size": 19, "difficulty": "hard", "first_move": "ai", "base_depths": {"hard": 4}}
    options = main.resolve_options(parse_args([]), settings)
    assert options == {
        "board_size": 19,
        "difficulty": 1,
        "depth": 4,
        "first_move": "ai",
        "mode": "human-vs-ai",
        "hint_depth": 3,
    }


def test_cli_overrides_settings():
    args = parse_args(["--board-size", "15", "--difficulty", "impossible", "--depth", "2", "--mode", "ai-vs-ai", "--hint-depth", "1"])
    options = main.resolve_options(args, {"board_size": 19, "difficulty": "normal"})
    assert options["board_size"] == 15
    assert options["difficulty"] == 2
    assert options["depth"] == 2
    assert options["mode"] == "ai-vs-ai"
    assert options["hint_depth"] == 1


def test_unknown_difficulty_in_settings_is_rejected():
    with pytest.raises(ValueError):
        main.resolve_options(parse_args([]), {"difficulty": "easy"})


def test_nonstandard_size_only_warns(caplog):
    options = main.resolve_options(parse_args(["--board-size", "9"]), {})
    assert options["board_size"] == 9
    assert "not a standard preset" in caplog.text


@pytest.mark.parametrize(
    "mode, first, expected",
    [
        ("human-vs-ai", "player", (HumanPlayer, AIPlayer)),
        ("human-vs-ai", "ai", (AIPlayer, HumanPlayer)),
        ("ai-vs-ai", "player", (AIPlayer, AIPlayer)),
        ("human-vs-human", "ai", (HumanPlayer, HumanPlayer)),
    ],
)
def test_build_players(mode, first, expected):
    options = {"mode": mode, "first_move": first, "depth": 3, "difficulty": 1, "hint_depth": 2}
    black, white = main.build_players(options)
    assert (type(black), type(white)) == expected
    assert black.color == BLACK and white.color == WHITE


def test_build_players_rejects_unknown_mode():
    with pytest.raises(ValueError):
        main.build_players({"mode": "online", "first_move": "player", "depth": 3, "difficulty": 0, "hint_depth": 3})


def test_text_view_marks_last_move_and_status():
    out = []
    b = Board(size=3)
    b.place(1, 1, BLACK)
    b.place(0, 2, WHITE)
    TextView(writer=out.append).render(b, last_move=(0, 2), current_player_color=BLACK)

    board_text, status = out
    assert board_text.splitlines() == [
        "    0  1  2",
        "0   .  . [O]",
        "1   .  X  .",
        "2   .  .  .",
    ]
    assert status == "Black to move"


def test_text_view_result_messages():
    view = TextView(writer=lambda msg: None)
    assert view._status(BLACK, BLACK) == "Black Wins!"
    assert view._status(WHITE, WHITE) == "White Wins!"
    assert view._status(BLACK, 0) == "Draw"


@pytest.mark.parametrize("last_move", [(10, 7), (0, 0), (14, 14)])
def test_text_view_bracket_keeps_columns_aligned(last_move):
    b = Board(size=15)
    b.place(*last_move, WHITE)
    b.place(10, 8, BLACK)
    view = TextView(writer=lambda msg: None)

    plain = view.board_lines(b)
    marked = view.board_lines(b, last_move=last_move)

    row = last_move[0] + 1
    assert "[O]" in marked[row]
    assert marked[row].replace("[", " ").replace("]", " ").rstrip() == plain[row]
    assert marked[:row] + marked[row + 1:] == plain[:row] + plain[row + 1:]
    # Stone sits under its column label.
    col_label = plain[0].index(f" {last_move[1]}", 3 + 4 * last_move[1]) + len(str(last_move[1]))
    assert marked[row][col_label] == "O"


@pytest.mark.parametrize("settings", [{"first_move": "human"}, {"mode": "online"}])
def test_unknown_first_move_or_mode_in_settings_is_rejected(settings):
    with pytest.raises(ValueError):
        main.resolve_options(parse_args([]), settings)


def test_difficulty_help_warns_about_deep_searches():
    from Gomoku_Minimax.utils.cli import build_parser

    help_text = build_parser().format_help()
    assert "5 and 7 plies" in " ".join(help_text.split())
